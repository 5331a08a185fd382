import pytest

from quadkit.curve import BatchedCurve, Curve, Interpolation


def test_default_curve_settings():
    curve = Curve()
    assert curve.points == []
    assert curve.interpolation is Interpolation.LINEAR
    assert curve.resolution == 20


def test_batch_starts_at_first_key_value():
    batched = Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]).batch()
    assert batched.points[0] == pytest.approx(0.5)


def test_batch_of_rising_line_is_monotone_and_bounded():
    batched = Curve(points=[(0.0, 0.0), (1.0, 1.0)]).batch()
    assert len(batched.points) >= 20
    assert batched.points == sorted(batched.points)
    assert all(0.0 <= p <= 1.0 for p in batched.points)


def test_constant_curve_stays_constant():
    batched = Curve(points=[(0.0, 0.7), (1.0, 0.7)]).batch()
    assert all(p == pytest.approx(0.7) for p in batched.points)
    assert batched.get(0.3) == pytest.approx(0.7)


def test_higher_resolution_gives_more_samples():
    coarse = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=10).batch()
    fine = Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=40).batch()
    assert len(fine.points) > len(coarse.points)


def test_peak_curve_reaches_its_peak():
    batched = Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]).batch()
    assert max(batched.points) == pytest.approx(1.0)


def test_bezier_is_rejected():
    curve = Curve(points=[(0.0, 0.0), (1.0, 1.0)], interpolation=Interpolation.BEZIER)
    with pytest.raises(ValueError):
        curve.batch()


def test_non_positive_resolution_is_rejected():
    with pytest.raises(ValueError):
        Curve(points=[(0.0, 0.0), (1.0, 1.0)], resolution=0).batch()


def test_get_endpoints_match_stored_points():
    batched = BatchedCurve([0.0, 2.0, 4.0, 6.0])
    assert batched.get(0.0) == 0.0
    assert batched.get(1.0) == 6.0


def test_get_interpolates_between_samples():
    batched = BatchedCurve([0.0, 2.0, 4.0, 6.0])
    value = batched.get(0.125)
    assert 0.0 < value < 2.0


def test_get_negative_t_clamps_to_first_index():
    batched = BatchedCurve([3.0, 5.0])
    assert batched.get(-0.5) <= 3.0


def test_get_on_empty_curve_raises():
    with pytest.raises(ValueError):
        BatchedCurve([]).get(0.5)


def test_single_point_curve_batches_to_nothing():
    batched = Curve(points=[(0.0, 1.0)]).batch()
    assert batched.points == []
    with pytest.raises(ValueError):
        batched.get(0.0)