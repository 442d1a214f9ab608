"""
Resolving Lattice Point Sequences over Integer Ranges
=====================================================

This package walks a contiguous range of non-negative integers in an order
where every prefix is spread across the whole range: both endpoints first,
then the midpoint, quarter points, eighth points and so on, finishing with
whatever values rounding left out. Every value is produced exactly once and
the order is fully deterministic.

Main entry points:
- from_half_open: sequencer over [start, end)
- from_closed: sequencer over [start, end]
- rlp_iter: sequencer over a Python range
- RLPSequencer: the underlying state machine

License: MIT
"""

from .sequencer import Phase, RLPSequencer
from .ranges import from_half_open, from_closed, rlp_iter
from .utils import (
    compute_separation_radius,
    compute_covering_radius,
    compute_mesh_ratio,
)

__version__ = "1.0.0"
__all__ = [
    "Phase",
    "RLPSequencer",
    "from_half_open",
    "from_closed",
    "rlp_iter",
    "compute_separation_radius",
    "compute_covering_radius",
    "compute_mesh_ratio",
]
