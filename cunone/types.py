from enum import Enum
from collections.abc import Callable
from typing import Any

from dataclasses import dataclass

#=============================================================================#

DEFAULT_STRIDE = 1

# the default offset depends on the sign of the stride: 0 when walking
# forward, N - 1 when walking backward.
DEFAULT_OFFSET = None

MAX_PREDICATE_ARGS = 3

Predicate = Callable[..., Any]
BoolList = list[bool]

class ArrayKind(Enum):
    """The element access strategies recognized by the scanner.

    :GENERIC: indexed collections such as `list` and `tuple`; read with `x[i]`.
    :NUMERIC: fixed-width numeric buffers (`numpy.ndarray`, `array.array`, `memoryview`); read with `x[i]`.
    :ACCESSOR: containers exposing `get(i)` and `set(i, v)`; read with `x.get(i)`."""
    GENERIC = "generic"
    NUMERIC = "numeric"
    ACCESSOR = "accessor"

@dataclass
class ScanParameters:
    "Traversal order as an (offset, stride) pair. Unset fields take their defaults once the length is known."
    offset: int = DEFAULT_OFFSET
    stride: int = DEFAULT_STRIDE

    def collect(self):
        return [
            self.offset,
            self.stride,
        ]

DEFAULT_SCAN_PARAMETERS = ScanParameters()

REVERSE_SCAN_PARAMETERS = ScanParameters(stride = -1)
