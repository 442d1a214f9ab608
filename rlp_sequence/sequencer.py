"""
Resolving Lattice Point Sequencer
=================================

This module implements the stateful generator that walks a normalized
domain ``{0, 1, ..., R}`` (translated by a shift) in resolving lattice
point order:

    0, R, round(R/2), round(R/4), round(3R/4), round(R/8), ...

The candidates of level p are the lattice points

    round(R * k / 2^p),   k = 1, ..., 2^p - 1,   p = 1, ..., round(log2 R)

Candidates that round onto an already emitted offset are skipped. Once
the last level is exhausted, a linear scan fills whatever offsets the
rounding collisions left out, so every offset is produced exactly once.

The sequence is deterministic and finite; it cannot be restarted. Build a
new sequencer (or ``copy()`` one before iterating) to replay it.
"""

import enum
import numpy as np
from typing import List, Optional

from .utils import check_bound, round_half_away, rounded_log2


class Phase(enum.Enum):
    """Stage of the sequencer, deciding which emission rule applies next."""

    START = "start"
    END = "end"
    LATTICE = "lattice"
    FINISHED = "finished"


class RLPSequencer:
    """
    Resolving lattice point sequencer over ``[shift, shift + range_size]``.

    Usually built through :func:`~rlp_sequence.ranges.from_half_open`,
    :func:`~rlp_sequence.ranges.from_closed` or
    :func:`~rlp_sequence.ranges.rlp_iter` rather than directly.

    Parameters
    ----------
    range_size : int
        Zero-based inclusive upper bound of the normalized domain, i.e.
        the domain holds ``range_size + 1`` values.
    shift : int, optional
        Lower bound of the original range, added to every offset before
        it is returned (default: 0).
    verbose : bool, optional
        If True, print phase transitions (default: False).

    Attributes
    ----------
    tested : np.ndarray
        Boolean array of shape (range_size + 1,); entry i is set once
        offset i has been emitted.
    numerator, pow : int
        Current lattice fraction ``numerator / 2**pow``. During the linear
        fill, ``numerator`` is the scan cursor.
    final_pow : int
        Last lattice level, ``round(log2(range_size))``.
    phase : Phase
        Current stage of the state machine.

    Examples
    --------
    >>> list(RLPSequencer(8))
    [0, 8, 4, 2, 6, 1, 3, 5, 7]
    >>> seq = RLPSequencer(8, shift=1000)
    >>> seq.take(3)
    [1000, 1008, 1004]
    """

    def __init__(self, range_size: int, shift: int = 0, verbose: bool = False):
        self.range_size = check_bound(range_size, "range_size")
        self.shift = check_bound(shift, "shift")
        self.verbose = verbose

        self.tested = np.zeros(self.range_size + 1, dtype=bool)
        self.numerator = 1
        self.pow = 1
        self.final_pow = rounded_log2(self.range_size)
        self.phase = Phase.START
        self._emitted = 0
        self._filling = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shift={self.shift}, "
            f"range_size={self.range_size}, phase={self.phase.name})"
        )

    @property
    def size(self) -> int:
        """Number of values in the domain."""
        return self.range_size + 1

    @property
    def emitted(self) -> int:
        """Number of values produced so far."""
        return self._emitted

    def __length_hint__(self) -> int:
        return self.size - self._emitted

    def __iter__(self):
        return self

    def __next__(self) -> int:
        value = self.produce_next()
        if value is None:
            raise StopIteration
        return value

    def take(self, n: int) -> List[int]:
        """Return up to the next ``n`` values (fewer once the sequence ends)."""
        out = []
        while len(out) < n:
            value = self.produce_next()
            if value is None:
                break
            out.append(value)
        return out

    def copy(self) -> "RLPSequencer":
        """Return an independent sequencer in the same state."""
        other = type(self).__new__(type(self))
        other.__dict__.update(self.__dict__)
        other.tested = self.tested.copy()
        return other

    def _set_phase(self, phase: Phase):
        if self.verbose:
            print(f"  phase {self.phase.name} -> {phase.name} "
                  f"after {self._emitted} values")
        self.phase = phase

    def _mark(self, offset: int) -> int:
        self.tested[offset] = True
        self._emitted += 1
        return offset + self.shift

    def produce_next(self) -> Optional[int]:
        """
        Produce the next value of the sequence.

        Returns
        -------
        int or None
            The next unvisited value, translated by ``shift``, or None once
            every value of the domain has been produced. After the first
            None, every further call returns None.
        """
        if self.phase is Phase.START:
            self._set_phase(Phase.END)
            return self._mark(0)

        if self.phase is Phase.END:
            if self.range_size == 0:
                self._set_phase(Phase.FINISHED)
                return None
            self._set_phase(Phase.LATTICE)
            return self._mark(self.range_size)

        if self.phase is Phase.LATTICE:
            return self._lattice_step()

        return None

    def _lattice_step(self) -> Optional[int]:
        while self.pow <= self.final_pow:
            denominator = 1 << self.pow
            val = round_half_away(
                self.range_size * (self.numerator / denominator)
            )
            found = not self.tested[val]

            # Advance to the next fraction, moving down a level after
            # (2^pow - 1) / 2^pow.
            if self.numerator == denominator - 1:
                self.numerator = 1
                self.pow += 1
            else:
                self.numerator += 1

            if found:
                return self._mark(val)

        if not self._filling:
            self._filling = True
            if self.verbose:
                print(f"  lattice exhausted at pow={self.pow}, "
                      f"{self.size - self._emitted} offsets left for linear fill")

        # Linear fill; numerator is the scan cursor from here on.
        out = None
        while self.numerator <= self.range_size:
            offset = self.numerator
            self.numerator += 1
            if not self.tested[offset]:
                out = self._mark(offset)
                break

        if self.numerator > self.range_size:
            self._set_phase(Phase.FINISHED)

        return out
