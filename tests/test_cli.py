"""Tests for the ``python -m fastrandom cli`` sub-command."""

import pytest

from fastrandom.__main__ import _build_parser, _run_cli, _run_server
from fastrandom.systems.xorshift import Xorshift128


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr("fastrandom.utils.logging.setup_logging", lambda *args, **kwargs: None)


def _run(argv):
    parser = _build_parser()
    args = parser.parse_args(argv)
    _run_cli(args, parser)


def test_prints_one_value_per_line(capsys):
    _run(["cli", "--seed", "0", "--kind", "uint", "--count", "3"])
    ref = Xorshift128(0)
    lines = capsys.readouterr().out.split()
    assert lines == [str(ref.next_uint()) for _ in range(3)]
    assert lines[0] == "273327012"


def test_bytes_printed_as_hex(capsys):
    _run(["cli", "--seed", "9", "--kind", "bytes", "--count", "5"])
    assert capsys.readouterr().out.strip() == Xorshift128(9).random_bytes(5).hex()


def test_bounded_next(capsys):
    _run(["cli", "--seed", "1", "--count", "50", "--lower", "10", "--upper", "20"])
    values = [int(v) for v in capsys.readouterr().out.split()]
    assert len(values) == 50
    assert all(10 <= v < 20 for v in values)


def test_invalid_bounds_exit(capsys):
    with pytest.raises(SystemExit) as exc:
        _run(["cli", "--seed", "1", "--lower", "5", "--upper", "2"])
    assert exc.value.code == 2
    assert "upper_bound" in capsys.readouterr().err


def test_unknown_kind_rejected():
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["cli", "--kind", "gaussian"])


def test_serve_rejects_base_seed_outside_int32(monkeypatch, capsys):
    started = []
    monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: started.append(args))
    parser = _build_parser()
    args = parser.parse_args(["serve", "--seed", str(1 << 40)])
    with pytest.raises(SystemExit) as exc:
        _run_server(args, parser)
    assert exc.value.code == 2
    assert "base_seed" in capsys.readouterr().err
    assert started == []
