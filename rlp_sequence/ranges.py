"""
Construction of sequencers from integer ranges.

Both range kinds are normalized to a zero-based domain ``[0, range_size]``
plus a shift equal to the lower bound.
"""

from .sequencer import RLPSequencer
from .utils import check_bound


def from_half_open(start: int, end: int, verbose: bool = False) -> RLPSequencer:
    """
    Build a sequencer over the half-open range ``[start, end)``.

    Parameters
    ----------
    start, end : int
        Non-negative bounds with ``end > start``.
    verbose : bool, optional
        Passed on to the sequencer (default: False).

    Raises
    ------
    ValueError
        If the range is empty or inverted, or a bound is negative.
    TypeError
        If a bound is not an integer.

    Examples
    --------
    >>> list(from_half_open(0, 9))
    [0, 8, 4, 2, 6, 1, 3, 5, 7]
    """
    start = check_bound(start, "start")
    end = check_bound(end, "end")
    if end <= start:
        raise ValueError(
            f"Half-open range [{start}, {end}) is empty; end must exceed start"
        )
    return RLPSequencer(end - start - 1, shift=start, verbose=verbose)


def from_closed(start: int, end: int, verbose: bool = False) -> RLPSequencer:
    """
    Build a sequencer over the closed range ``[start, end]``.

    Examples
    --------
    >>> list(from_closed(1, 9))
    [1, 9, 5, 3, 7, 2, 4, 6, 8]
    """
    start = check_bound(start, "start")
    end = check_bound(end, "end")
    if end < start:
        raise ValueError(
            f"Closed range [{start}, {end}] is inverted; end must be >= start"
        )
    return RLPSequencer(end - start, shift=start, verbose=verbose)


def rlp_iter(r: range, verbose: bool = False) -> RLPSequencer:
    """
    Build a sequencer over the values of a Python ``range`` with step 1.

    >>> rlp_iter(range(7, 7919)).take(2)
    [7, 7918]
    """
    if not isinstance(r, range):
        raise TypeError(f"expected a range, got {type(r).__name__}")
    if r.step != 1:
        raise ValueError(f"range step must be 1, got {r.step}")
    return from_half_open(r.start, r.stop, verbose=verbose)
