import operator

import numpy as np
import pytest

from rlp_sequence import Phase, RLPSequencer, from_closed, from_half_open


def test_small_domain_order():
    assert list(RLPSequencer(8)) == [0, 8, 4, 2, 6, 1, 3, 5, 7]


def test_shift_is_added_to_every_value():
    assert list(RLPSequencer(8, shift=1000)) == [
        1000, 1008, 1004, 1002, 1006, 1001, 1003, 1005, 1007
    ]


def test_ties_round_away_from_zero():
    # 100/8 = 12.5 must land on 13, not on 12 as banker's rounding would
    assert RLPSequencer(100).take(9) == [0, 100, 50, 25, 75, 13, 38, 63, 88]


@pytest.mark.parametrize("range_size, expected", [
    (0, [0]),
    (1, [0, 1]),
    (2, [0, 2, 1]),
    (3, [0, 3, 2, 1]),
])
def test_tiny_domains(range_size, expected):
    assert list(RLPSequencer(range_size)) == expected


def test_phase_transitions():
    seq = RLPSequencer(2)
    assert seq.phase is Phase.START
    assert seq.produce_next() == 0
    assert seq.phase is Phase.END
    assert seq.produce_next() == 2
    assert seq.phase is Phase.LATTICE
    assert seq.produce_next() == 1
    assert seq.produce_next() is None
    assert seq.phase is Phase.FINISHED


def test_single_element_finishes_in_end_phase():
    seq = RLPSequencer(0, shift=5)
    assert seq.produce_next() == 5
    assert seq.produce_next() is None
    assert seq.phase is Phase.FINISHED


def test_finished_is_idempotent():
    seq = RLPSequencer(4)
    list(seq)
    state = (seq.numerator, seq.pow, seq.tested.copy())
    for _ in range(5):
        assert seq.produce_next() is None
    assert seq.numerator == state[0]
    assert seq.pow == state[1]
    assert np.array_equal(seq.tested, state[2])
    with pytest.raises(StopIteration):
        next(seq)


@pytest.mark.parametrize("n", list(range(1, 130)) + [255, 256, 257, 1000, 1023, 1025])
def test_every_offset_exactly_once(n):
    seq = RLPSequencer(n - 1)
    out = list(seq)
    assert len(out) == n
    assert sorted(out) == list(range(n))
    assert seq.tested.all()


@pytest.mark.parametrize("n", [2, 3, 17, 100, 4096])
def test_endpoints_come_first(n):
    out = RLPSequencer(n - 1, shift=3).take(2)
    assert out == [3, 3 + n - 1]


def test_deterministic():
    assert list(from_closed(13, 2000)) == list(from_closed(13, 2000))


@pytest.mark.parametrize("a", [1, 7, 1000, 123456])
def test_offset_matches_zero_based_run(a):
    n = 517
    shifted = [v - a for v in from_half_open(a, a + n)]
    assert shifted == list(from_half_open(0, n))


def test_copy_is_independent():
    seq = RLPSequencer(50)
    seq.take(4)
    clone = seq.copy()
    rest = list(seq)
    assert list(clone) == rest
    assert clone.tested is not seq.tested


def test_take_stops_at_end():
    seq = RLPSequencer(3)
    assert seq.take(10) == [0, 3, 2, 1]
    assert seq.take(10) == []


def test_sizes():
    seq = RLPSequencer(9)
    with pytest.raises(TypeError):
        len(seq)
    assert seq.size == 10
    assert operator.length_hint(seq) == 10
    seq.take(3)
    assert seq.emitted == 3
    assert operator.length_hint(seq) == 7
    list(seq)
    assert operator.length_hint(seq) == 0


def test_final_pow():
    assert RLPSequencer(0).final_pow == 0
    assert RLPSequencer(1).final_pow == 0
    assert RLPSequencer(8).final_pow == 3
    assert RLPSequencer(100).final_pow == 7


def test_rejects_negative_state():
    with pytest.raises(ValueError):
        RLPSequencer(-1)
    with pytest.raises(ValueError):
        RLPSequencer(3, shift=-2)


def test_numpy_integers_are_widened():
    seq = RLPSequencer(np.uint8(200), shift=np.uint8(100))
    out = seq.take(2)
    assert out == [100, 300]
    assert all(type(v) is int for v in out)
    assert type(seq.range_size) is int
    assert type(seq.shift) is int


@pytest.mark.parametrize("range_size, shift", [(True, 0), (4, False), (2.0, 0)])
def test_rejects_non_integer_state(range_size, shift):
    with pytest.raises(TypeError):
        RLPSequencer(range_size, shift=shift)


def test_repr():
    assert repr(RLPSequencer(4, shift=2)) == \
        "RLPSequencer(shift=2, range_size=4, phase=START)"


def test_verbose_reports_phases(capsys):
    list(RLPSequencer(8, verbose=True))
    out = capsys.readouterr().out
    assert "START -> END" in out
    assert "END -> LATTICE" in out
    assert "lattice exhausted at pow=4" in out
    assert "LATTICE -> FINISHED" in out


def test_quiet_by_default(capsys):
    list(RLPSequencer(8))
    assert capsys.readouterr().out == ""


def test_lattice_exhaustion_reported_once(capsys):
    list(RLPSequencer(100, verbose=True))
    out = capsys.readouterr().out
    assert out.count("lattice exhausted") == 1
