import pytest

from dvs_app.domain.errors import AccumulatorClosed, InvariantViolation
from dvs_app.domain.pupillary_distance import AccumulatorState, PupillaryDistance


@pytest.mark.parametrize('first,second', [(100, 140), (140, 100)])
def test_distance_is_order_independent(first, second):
    acc = PupillaryDistance()
    acc.append_pupil_x(first)
    acc.append_pupil_x(second)
    assert acc.value == 40
    assert acc.state is AccumulatorState.FINAL


def test_value_is_none_until_two_samples():
    acc = PupillaryDistance()
    assert acc.value is None
    acc.append_pupil_x(12.5)
    assert acc.state is AccumulatorState.FIRST_SAMPLE
    assert acc.value is None


def test_first_sample_of_zero_is_a_real_sample():
    acc = PupillaryDistance()
    acc.append_pupil_x(0)
    acc.append_pupil_x(37)
    assert acc.value == 37


def test_third_sample_is_rejected():
    acc = PupillaryDistance()
    acc.append_pupil_x(100)
    acc.append_pupil_x(140)
    with pytest.raises(AccumulatorClosed):
        acc.append_pupil_x(90)
    assert acc.value == 40


def test_closed_is_an_invariant_violation():
    assert issubclass(AccumulatorClosed, InvariantViolation)
