import warnings

import numpy as np
from typing import Optional, Tuple

import numba

from .span import span

# dtype kinds the compiled kernel can compare: bool, int, uint, float
_KERNEL_KINDS = "biuf"

@numba.jit(nopython=True)
def _array_span_kernel(query: np.ndarray, reference: np.ndarray) -> Tuple[int, int]:
    """
    Compiled minimal-window scan over two non-empty 1D arrays.

    Uses -1 to mark "no chain yet" in the working array and returns
    (-1, -1) when `query` does not occur in `reference`.
    """

    query_len = query.size
    last = query_len - 1

    start_of = np.empty(query_len, dtype=np.int64)
    start_of[:] = -1

    best_start = -1
    best_end = -1

    for j in range(reference.size):
        for k in range(last, -1, -1):
            if reference[j] == query[k]:

                if k == 0:
                    start_of[0] = j
                else:
                    start_of[k] = start_of[k - 1]

                if k == last and start_of[last] != -1:
                    if best_start == -1 or j - start_of[last] < best_end - best_start:
                        best_start = start_of[last]
                        best_end = j

    return best_start, best_end


def _check_one_dimensional(arr: np.ndarray, param_name: str) -> None:
    """
    Raise the package's parameter error if a numpy array is not 1D.
    """

    if arr.ndim != 1:
        raise ValueError(
            f"Could not process parameter '{param_name}' with shape {arr.shape}.\n"
            f"Reason: Array must be one-dimensional."
        )


def array_span(query, reference) -> Optional[Tuple[int, int]]:
    """
    Find the shortest window of a 1D array that contains another array as an
    ordered subsequence.

    This gives the same results as :func:`minspan.span`, but runs the scan in
    numba when both inputs are 1D numpy arrays with a boolean or numeric
    dtype. Numpy arrays of other dtypes (strings, objects) fall back to
    :func:`minspan.span` with a warning. Any other sequence (lists, tuples,
    strings) is passed to :func:`minspan.span` as-is, without conversion.

    Parameters
    ----------
    query : Sequence or numpy.ndarray
        Sequence to search FOR.
    reference : Sequence or numpy.ndarray
        Sequence to search IN.

    Returns
    -------
    tuple[int, int] or None
        Inclusive ``(start, end)`` indices into `reference`, or None if there
        is no match. An empty `query` returns ``(0, 0)``.

    Raises
    ------
    ValueError
        If `query` or `reference` is a numpy array that is not
        one-dimensional.
    """

    for param_name, arr in (("query", query), ("reference", reference)):
        if isinstance(arr, np.ndarray):
            _check_one_dimensional(arr, param_name)

    # Converting other sequences would coerce mixed elements to one dtype
    if not (isinstance(query, np.ndarray) and isinstance(reference, np.ndarray)):
        return span(query, reference)

    if (query.dtype.kind not in _KERNEL_KINDS or
        reference.dtype.kind not in _KERNEL_KINDS):
        warnings.warn(
            f"Cannot compile a search over dtypes '{query.dtype}' and "
            f"'{reference.dtype}'. Falling back to the generic span search."
        )
        return span(query, reference)

    if query.size == 0:
        return (0, 0)

    if reference.size == 0:
        return None

    # ensure the arrays are contiguous
    start, end = _array_span_kernel(np.ascontiguousarray(query),
                                    np.ascontiguousarray(reference))
    if start < 0:
        return None

    return (int(start), int(end))
