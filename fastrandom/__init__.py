"""Fast, reseedable xorshift128 pseudo-random number generator."""

from fastrandom.core.errors import InvalidArgumentError
from fastrandom.core.state import GeneratorSnapshot, GeneratorState
from fastrandom.systems.streams import StreamFactory, derive_seed
from fastrandom.systems.xorshift import Xorshift128

__all__ = [
    "GeneratorSnapshot",
    "GeneratorState",
    "InvalidArgumentError",
    "StreamFactory",
    "Xorshift128",
    "derive_seed",
]

__version__ = "0.1.0"
