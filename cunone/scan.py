from operator import truth

import numpy as np

from .types import Any, Callable, Predicate, BoolList, ScanParameters, DEFAULT_SCAN_PARAMETERS
from .accessors import resolve_array_kind, element_reader, element_writer, is_writable
from .traversal import is_integer, resolve_traversal, bind_predicate
from .util import log, add_tqdm

#=============================================================================#
# the traversal

def _cumulative_none(
    read: Callable[[int], Any],
    x,
    indices: range,
    call: Predicate,
    write: Callable[[int, bool], None],
    positions: range,
) -> None:
    # once a visited element satisfies the predicate, every later result is
    # False and the predicate is not called again.
    none_so_far = True
    for (idx, pos) in zip(indices, positions):
        if none_so_far and call(read(idx), idx, x):
            none_so_far = False
        write(pos, none_so_far)

#=============================================================================#
# allocating scans

def cunone_by(
    x,
    predicate: Predicate,
    context = None,
    *,
    offset: int = None,
    stride: int = None,
) -> BoolList:
    """Cumulatively tests whether every visited element of `x` fails the test implemented by `predicate`.

    Returns a new list of booleans with the length of `x`. The entry at a
    visited index `i` is True iff `predicate` was falsy for `x[i]` and for every
    element visited before it. Indices that the traversal does not reach are
    False.

    :x: a list, tuple, or other sequence; a one-dimensional numpy array, array.array, or memoryview; or an accessor array exposing `get` and `set`.
    :predicate: called as `predicate(value, index, x)`, or with fewer arguments if it takes fewer.
    :context: if not None, passed to `predicate` as its leading argument, like `self`.
    :offset: the first index to visit. Defaults to 0, or `len(x) - 1` when `stride` is negative.
    :stride: the step between visited indices. Defaults to 1."""
    kind = resolve_array_kind(x)
    call = bind_predicate(predicate, context)
    n = len(x)
    indices = resolve_traversal(n, offset, stride)
    out = [False] * n
    _cumulative_none(element_reader(x, kind), x, indices, call, out.__setitem__, indices)
    return out

def cunone(
    x,
    *,
    offset: int = None,
    stride: int = None,
) -> BoolList:
    """Cumulatively tests whether every visited element of `x` is falsy.

        cunone_by(x, operator.truth, offset = offset, stride = stride)"""
    return cunone_by(x, truth, offset = offset, stride = stride)

#=============================================================================#
# scans into a caller-supplied output

def resolve_output_positions(
    n_out: int,
    n_visits: int,
    out_offset: int,
    out_stride: int,
) -> range:
    """The positions of an output of length `n_out` that receive `n_visits` results.

    Raises ValueError if the offset or stride is not a valid integer, or if any position falls outside [0, n_out)."""
    if not is_integer(out_stride) or out_stride == 0:
        raise ValueError(f"output stride must be a nonzero integer, got {out_stride!r}")
    if not is_integer(out_offset):
        raise ValueError(f"output offset must be an integer, got {out_offset!r}")
    out_offset = int(out_offset)
    out_stride = int(out_stride)
    if n_visits == 0:
        return range(0)
    last = out_offset + (n_visits - 1) * out_stride
    for pos in (out_offset, last):
        if not (0 <= pos < n_out):
            raise ValueError(f"output position {pos} is out of bounds for an output of length {n_out}")
    return range(out_offset, last + out_stride, out_stride)

def cunone_by_assign(
    x,
    predicate: Predicate,
    out,
    out_stride: int = 1,
    out_offset: int = 0,
    context = None,
    *,
    offset: int = None,
    stride: int = None,
):
    """Like `cunone_by`, but writes the result for the k-th visited element to `out[out_offset + k * out_stride]`.

    Every output position is checked before the predicate is first called.
    Positions of `out` that are not written keep their values. Returns `out`.

    :out: a mutable sequence, writable numeric buffer, or accessor array."""
    kind = resolve_array_kind(x)
    call = bind_predicate(predicate, context)
    indices = resolve_traversal(len(x), offset, stride)
    out_kind = resolve_array_kind(out)
    if not is_writable(out, out_kind):
        raise TypeError(f"{type(out).__name__} output is not writable")
    positions = resolve_output_positions(len(out), len(indices), out_offset, out_stride)
    _cumulative_none(element_reader(x, kind), x, indices, call, element_writer(out, out_kind), positions)
    return out

#=============================================================================#
# batches

def cunone_by_rows(
    matrix,
    predicate: Predicate,
    context = None,
    params: ScanParameters = DEFAULT_SCAN_PARAMETERS,
    *,
    verbose = False,
) -> np.ndarray:
    """Applies `cunone_by` to each row of a two-dimensional array.

    :matrix: a two-dimensional numpy array, or anything numpy.asarray converts to one.
    :predicate: as in `cunone_by`. It is called with the row as its third argument.
    :context: shared by every row, so state accumulated by the predicate carries over from one row to the next.
    :params: the traversal order within each row.
    :verbose: log the batch shape and show a progress bar over rows."""
    matrix = np.asarray(matrix)
    if matrix.ndim != 2:
        raise ValueError(f"expected a two-dimensional array, got {matrix.ndim} dimensions")
    offset, stride = params.collect()
    rows = matrix
    if verbose:
        log(f"scanning {matrix.shape[0]} rows of length {matrix.shape[1]}")
        rows = add_tqdm(matrix, description = "cunone_by")
    out = np.zeros(matrix.shape, dtype = bool)
    for (i, row) in enumerate(rows):
        out[i] = cunone_by(row, predicate, context, offset = offset, stride = stride)
    return out
