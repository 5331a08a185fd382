import pytest

from quadkit.camera import CameraRig, angle_lerp, short_angle_dist, wrap_rotation


def test_short_angle_dist_goes_the_short_way():
    assert short_angle_dist(0.0, 350.0) == pytest.approx(-10.0)


@pytest.mark.parametrize(
    "a0,a1",
    [(0.0, 90.0), (0.0, 270.0), (10.0, 350.0), (350.0, 10.0), (180.0, 0.0), (45.0, 45.0)],
)
def test_short_angle_dist_is_at_most_half_turn(a0, a1):
    d = short_angle_dist(a0, a1)
    assert abs(d) <= 180.0 + 1e-9
    assert (a0 + d - a1) % 360.0 == pytest.approx(0.0, abs=1e-9) or (
        (a0 + d - a1) % 360.0 == pytest.approx(360.0)
    )


@pytest.mark.parametrize("a0,a1", [(0.0, 90.0), (350.0, 10.0), (120.0, 300.0)])
def test_angle_lerp_endpoints(a0, a1):
    assert angle_lerp(a0, a1, 0.0) == pytest.approx(a0)
    end = angle_lerp(a0, a1, 1.0) % 360.0
    assert end == pytest.approx(a1 % 360.0)


def test_wrap_rotation_keeps_in_range_values():
    assert wrap_rotation(45.0) == 45.0


@pytest.mark.parametrize("angle", [-350.0, -10.0, 0.0, 359.0, 360.0, 700.0])
def test_wrap_rotation_lands_in_full_turn(angle):
    wrapped = wrap_rotation(angle)
    assert 0.0 <= wrapped < 360.0
    assert (wrapped - angle) % 360.0 == pytest.approx(0.0)


def test_step_moves_target_with_wasd():
    rig = CameraRig()
    assert rig.step({"w", "a"}) is True
    assert rig.target[0] == pytest.approx(0.1)
    assert rig.target[1] == pytest.approx(-0.1)


def test_step_moves_offset_with_arrows():
    rig = CameraRig()
    rig.step({"right", "up"})
    assert rig.offset[0] == pytest.approx(0.1)
    assert rig.offset[1] == pytest.approx(0.1)


def test_ctrl_wheel_zooms():
    rig = CameraRig()
    rig.step({"ctrl"}, wheel_y=1.0)
    assert rig.zoom == pytest.approx(1.1)
    assert rig.rotation == 0.0


def test_wheel_rotates_and_wraps():
    rig = CameraRig()
    rig.step(set(), wheel_y=1.0)
    assert rig.rotation == pytest.approx(10.0)
    rig = CameraRig()
    rig.step(set(), wheel_y=-1.0)
    assert rig.rotation == pytest.approx(wrap_rotation(-10.0))


def test_smooth_rotation_approaches_rotation():
    rig = CameraRig()
    rig.step(set(), wheel_y=3.0)
    first = rig.smooth_rotation
    assert 0.0 < first < rig.rotation
    rig.step(set())
    assert first < rig.smooth_rotation < rig.rotation


def test_quit_keys_stop():
    assert CameraRig().step({"q"}) is False
    assert CameraRig().step({"escape"}) is False


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        CameraRig().step({"space"})