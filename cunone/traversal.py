import inspect
from functools import partial

import numpy as np

from .types import Predicate, DEFAULT_STRIDE, MAX_PREDICATE_ARGS

#=============================================================================#
# offset and stride

def is_integer(value) -> bool:
    "True for python and numpy integers. Booleans are not integers here."
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))

def resolve_stride(stride = None) -> int:
    """Validates `stride`, substituting DEFAULT_STRIDE when it is None.

    Raises TypeError for non-integers and ValueError for zero."""
    if stride is None:
        return DEFAULT_STRIDE
    if not is_integer(stride):
        raise TypeError(f"stride must be an integer, got {type(stride).__name__}")
    if stride == 0:
        raise ValueError("stride must be nonzero")
    return int(stride)

def resolve_offset(n: int, offset = None, stride: int = DEFAULT_STRIDE) -> int:
    """Validates `offset` against a sequence of length `n`.

    :n: the length of the sequence.
    :offset: the first index to visit, or None for the default, which is 0 for a positive stride and `n - 1` for a negative stride.
    :stride: a resolved stride."""
    if offset is None:
        return 0 if stride > 0 else max(n - 1, 0)
    if not is_integer(offset):
        raise ValueError(f"offset must be an integer, got {type(offset).__name__}")
    offset = int(offset)
    if n > 0 and not (0 <= offset < n):
        raise ValueError(f"offset {offset} is out of bounds for a sequence of length {n}")
    return offset

def resolve_traversal(n: int, offset = None, stride = None) -> range:
    """The indices visited in a sequence of length `n`, in traversal order.

    The progression `offset, offset + stride, ...` ends at the first index
    outside [0, n), so it never has more than `n` terms."""
    stride = resolve_stride(stride)
    offset = resolve_offset(n, offset, stride)
    if n == 0:
        return range(0)
    stop = n if stride > 0 else -1
    return range(offset, stop, stride)

def count_visits(n: int, offset = None, stride = None) -> int:
    """
        len(resolve_traversal(n, offset, stride))"""
    return len(resolve_traversal(n, offset, stride))

#=============================================================================#
# predicates

def count_positional_args(predicate: Predicate) -> int:
    """The number of positional arguments `predicate` requires.

    Variadic predicates are treated as accepting MAX_PREDICATE_ARGS. Callables
    without an introspectable signature, such as some builtins, are treated as
    taking the value only."""
    try:
        signature = inspect.signature(predicate)
    except (TypeError, ValueError):
        return 1
    required = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return MAX_PREDICATE_ARGS
        elif param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD) and param.default is param.empty:
            required += 1
    return required

def bind_predicate(predicate: Predicate, context = None) -> Predicate:
    """Adapts `predicate` to the `(value, index, x)` calling convention used by the scanner.

    :predicate: a callable taking `(value[, index[, x]])`, or `(context, value[, index[, x]])` when a context is passed.
    :context: an optional caller-owned object, passed to every call as the leading argument. It is not copied."""
    if not callable(predicate):
        raise TypeError(f"predicate must be callable, got {type(predicate).__name__}")
    if context is not None:
        predicate = partial(predicate, context)
    n_args = count_positional_args(predicate)
    if n_args > MAX_PREDICATE_ARGS:
        raise TypeError(f"predicate requires {n_args} positional arguments, but at most {MAX_PREDICATE_ARGS} are supplied")
    if n_args <= 1:
        return lambda value, idx, x: predicate(value)
    elif n_args == 2:
        return lambda value, idx, x: predicate(value, idx)
    else:
        return predicate
