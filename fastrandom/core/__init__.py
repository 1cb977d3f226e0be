"""Core data models: state words, kernel, errors."""

from fastrandom.core.enums import SampleKind
from fastrandom.core.errors import InvalidArgumentError
from fastrandom.core.state import GeneratorSnapshot, GeneratorState, step

__all__ = [
    "GeneratorSnapshot",
    "GeneratorState",
    "InvalidArgumentError",
    "SampleKind",
    "step",
]
