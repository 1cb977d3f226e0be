"""Entry point: ``python -m fastrandom``.

Supports two modes:
  - ``python -m fastrandom``        → Launch the FastAPI stream service
  - ``python -m fastrandom cli``    → Print samples from a seeded generator
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING"]


def _build_parser() -> argparse.ArgumentParser:
    from fastrandom.core.enums import SampleKind

    parser = argparse.ArgumentParser(description="Fast reseedable xorshift128 generator")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI stream service (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42, help="Base seed every stream is derived from")
    srv.add_argument("--max-count", type=int, default=10_000)
    srv.add_argument("--log-level", type=str, default="INFO", choices=_LOG_LEVELS)

    # --- Sampling mode ---
    cli = sub.add_parser("cli", help="Print samples from a seeded generator")
    cli.add_argument("--seed", type=int, default=None, help="Signed 32-bit seed; clock-seeded when omitted")
    cli.add_argument("--kind", type=str, default=SampleKind.NEXT.value, choices=[k.value for k in SampleKind])
    cli.add_argument("--count", type=int, default=10)
    cli.add_argument("--lower", type=int, default=None, help="Inclusive lower bound ('next' only)")
    cli.add_argument("--upper", type=int, default=None, help="Exclusive upper bound ('next' only)")
    cli.add_argument("--log-level", type=str, default="WARNING", choices=_LOG_LEVELS)

    return parser


def _run_server(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from fastrandom.core.errors import InvalidArgumentError, require_int32

    try:
        require_int32("base_seed", args.seed)
    except InvalidArgumentError as exc:
        parser.error(str(exc))

    import uvicorn

    from fastrandom.api.app import create_app
    from fastrandom.config import GeneratorConfig

    config = GeneratorConfig(
        base_seed=args.seed,
        host=args.host,
        port=args.port,
        max_sample_count=args.max_count,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


def _run_cli(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from fastrandom.core.enums import SampleKind
    from fastrandom.core.errors import InvalidArgumentError
    from fastrandom.systems.sampling import draw_samples
    from fastrandom.systems.xorshift import Xorshift128
    from fastrandom.utils.logging import setup_logging

    setup_logging(args.log_level)

    kind = SampleKind(args.kind)
    try:
        generator = Xorshift128(args.seed)
        values = draw_samples(generator, kind, args.count, args.lower, args.upper)
    except InvalidArgumentError as exc:
        parser.error(str(exc))

    logger.info("Drew %d %s value(s) with seed %d", len(values), kind.value, generator.seed)
    if kind is SampleKind.BYTES:
        print(bytes(values).hex())
        return
    for value in values:
        print(value)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args, parser)
    elif args.command == "cli":
        _run_cli(args, parser)


if __name__ == "__main__":
    main()
