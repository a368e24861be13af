from typing import Optional, Sequence, Tuple

def span(query: Sequence, reference: Sequence) -> Optional[Tuple[int, int]]:
    """
    Find the shortest window of `reference` that contains `query` as an
    ordered (not necessarily contiguous) subsequence.

    Elements are only ever compared with ``==``; no ordering, hashing or
    normalization is applied.

    Parameters
    ----------
    query : Sequence
        Sequence to search FOR.
    reference : Sequence
        Sequence to search IN. It is read once, left to right.

    Returns
    -------
    tuple[int, int] or None
        Inclusive ``(start, end)`` indices into `reference` such that
        ``reference[start] == query[0]`` and ``reference[end] == query[-1]``,
        or None if `query` does not occur in `reference`. If several windows
        share the minimal length, the first one found is returned; which one
        is not part of the contract. An empty `query` always returns
        ``(0, 0)``, even when `reference` is empty.
    """

    if len(query) == 0:
        return (0, 0)

    last = len(query) - 1

    # start_of[k] is the start of the latest-starting chain that has matched
    # query[0..k] at or before the current position.
    start_of = [None] * len(query)
    best = None

    for j, element in enumerate(reference):

        # Descending so start_of[k-1] still holds its value from before this
        # position. Ascending would let one element fill two query slots.
        for k in range(last, -1, -1):
            if element == query[k]:

                if k == 0:
                    start_of[0] = j
                else:
                    start_of[k] = start_of[k - 1]

                if k == last and start_of[last] is not None:
                    start = start_of[last]

                    # Strictly shorter only; ties keep the earlier window
                    if best is None or j - start < best[1] - best[0]:
                        best = (start, j)

    return best


def span_length(result: Optional[Tuple[int, int]]) -> Optional[int]:
    """
    Number of reference positions covered by a `span` result, or None if
    there was no match.
    """

    if result is None:
        return None

    start, end = result
    return end - start + 1
