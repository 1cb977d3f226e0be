"""Enumerations used throughout the package."""

from __future__ import annotations

from enum import Enum, unique


@unique
class SampleKind(str, Enum):
    """Generator accessors reachable from the CLI and the HTTP API."""

    NEXT = "next"
    UINT = "uint"
    INT = "int"
    DOUBLE = "double"
    FLOAT = "float"
    BOOL = "bool"
    BYTES = "bytes"
