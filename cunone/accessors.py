from array import array
from collections.abc import MutableSequence, Sequence

import numpy as np

from .types import Any, Callable, ArrayKind

#=============================================================================#
# accessor arrays

class AccessorArray:
    """A wrapper for an indexed collection whose elements are only reachable through `get` and `set`.

    There is no subscripting; consumers must go through the accessor protocol."""

    def __init__(self, data: Sequence):
        self._data = data

    def __len__(self):
        """The number of elements in the backing collection.

            len(self._data)"""
        return len(self._data)

    def get(self, idx: int) -> Any:
        "Return the element at index `idx`."
        return self._data[idx]

    def set(self, idx: int, value: Any) -> None:
        "Replace the element at index `idx` with `value`."
        self._data[idx] = value

    def to_list(self) -> list:
        return [self.get(i) for i in range(len(self))]

    def __repr__(self):
        return f"AccessorArray({self.to_list()})"

def to_accessor_array(x) -> AccessorArray:
    """Wraps `x` in an AccessorArray. Accessor arrays are returned unchanged.

    :x: a list, tuple, numeric buffer, or accessor array."""
    if is_accessor_array(x):
        return x
    return AccessorArray(x)

def is_accessor_array(x) -> bool:
    "True if `x` has a length and exposes callable `get` and `set` members."
    return (
        callable(getattr(x, "get", None)) and
        callable(getattr(x, "set", None)) and
        hasattr(x, "__len__")
    )

#=============================================================================#
# array kinds

def resolve_array_kind(x) -> ArrayKind:
    """Determines the element access strategy for `x`.

    Raises TypeError when `x` is not a supported sequence. Strings and byte
    strings are rejected even though they are sequences; multidimensional
    numpy arrays and memoryviews are rejected because `x[i]` would not be a
    scalar."""
    if is_accessor_array(x):
        return ArrayKind.ACCESSOR
    elif isinstance(x, np.ndarray):
        if x.ndim != 1:
            raise TypeError(f"numpy arrays must have exactly one dimension, got {x.ndim}")
        return ArrayKind.NUMERIC
    elif isinstance(x, memoryview):
        if x.ndim != 1:
            raise TypeError(f"memoryviews must have exactly one dimension, got {x.ndim}")
        return ArrayKind.NUMERIC
    elif isinstance(x, array):
        return ArrayKind.NUMERIC
    elif isinstance(x, (str, bytes, bytearray)):
        raise TypeError(f"{type(x).__name__} is not a supported sequence type")
    elif isinstance(x, Sequence):
        return ArrayKind.GENERIC
    else:
        raise TypeError(f"{type(x).__name__} is not a supported sequence type")

def is_writable(x, kind: ArrayKind) -> bool:
    if kind == ArrayKind.ACCESSOR:
        return True
    elif isinstance(x, np.ndarray):
        return x.flags.writeable
    elif isinstance(x, memoryview):
        return not x.readonly
    else:
        return isinstance(x, (MutableSequence, array))

#=============================================================================#
# element access strategies

def element_reader(x, kind: ArrayKind) -> Callable[[int], Any]:
    """The read operation for `x`, chosen once per scan so the traversal loop never branches on the kind.

    :x: the sequence.
    :kind: the ArrayKind of `x`, as returned by `resolve_array_kind`."""
    if kind == ArrayKind.ACCESSOR:
        return x.get
    else:
        return x.__getitem__

def element_writer(x, kind: ArrayKind) -> Callable[[int, Any], None]:
    "The write operation for `x`; the counterpart of `element_reader`."
    if kind == ArrayKind.ACCESSOR:
        return x.set
    else:
        return x.__setitem__
