import math

import pytest

from dsdemo.levelset import (
    clockwise,
    distance,
    initial_interface,
    interface_point,
    main,
    render_matlab,
    signed_distance,
)


def test_interface_point_at_zero_angle():
    assert interface_point(2.0, 0.0) == (2.0, 0.0)


def test_initial_interface_length_and_radius():
    pts = initial_interface(0.25, 0.0, 2.0 * math.pi, 101)
    assert len(pts) == 101
    assert pts[0] == (0.25, 0.0)
    for x, y in pts:
        assert math.hypot(x, y) == pytest.approx(0.25)


def test_initial_interface_matches_interface_point():
    pts = initial_interface(1.5, 1.0, 3.0, 4)
    assert pts[2] == interface_point(1.5, 1.0 + 2 * (2.0 / 4))


def test_distance_unit():
    assert distance((0.0, 0.0), (0.0, 1.0)) == 1.0


def test_distance_symmetric():
    a, b = (0.3, -1.2), (2.5, 4.0)
    assert distance(a, b) == distance(b, a)


def test_clockwise_tiny_triangle():
    assert clockwise((0.0, 0.0), (1.0e-15, 0.0), (0.0, -1.0e-15)) is True


def test_anticlockwise():
    assert clockwise((0.0, 0.0), (1.0, 0.0), (0.0, 1.0)) is False


def test_collinear_counts_as_clockwise():
    assert clockwise((0.0, 0.0), (1.0, 1.0), (2.0, 2.0)) is True


def test_signed_distance_signs_follow_direction():
    interface = [(0.05, 0.05), (0.35, 0.05)]
    n = 5
    phi = signed_distance(interface, 0.0, 0.0, 0.1, n)
    assert len(phi) == n * n
    d = distance((0.05, 0.05), (0.0, 0.0))
    # first segment runs towards +x: below is right (positive), above is left
    assert phi[0 * n + 0] == pytest.approx(d)
    assert phi[0 * n + 1] == pytest.approx(d)
    assert phi[1 * n + 0] == pytest.approx(-d)
    assert phi[1 * n + 1] == pytest.approx(-d)
    # closing segment runs towards -x: signs flip
    assert phi[0 * n + 3] == pytest.approx(-d)
    assert phi[0 * n + 4] == pytest.approx(-d)
    assert phi[1 * n + 3] == pytest.approx(d)
    assert phi[1 * n + 4] == pytest.approx(d)
    touched = {0, 1, 3, 4, n, n + 1, n + 3, n + 4}
    for idx, value in enumerate(phi):
        if idx not in touched:
            assert value == 1.0


def test_signed_distance_empty_interface():
    assert signed_distance([], 0.0, 0.0, 0.5, 3) == [1.0] * 9


def test_signed_distance_outside_grid():
    with pytest.raises(ValueError):
        signed_distance([(10.0, 10.0), (10.5, 10.0)], 0.0, 0.0, 0.1, 5)


def test_signed_distance_circle_bounded():
    pts = initial_interface(0.25, 0.0, 2.0 * math.pi, 101)
    phi = signed_distance(pts, -1.0, -1.0, 0.2, 11)
    assert all(abs(v) <= 1.0 for v in phi)
    assert any(v < 0 for v in phi)
    assert any(0 < v < 1.0 for v in phi)


def test_render_matlab_layout():
    text = render_matlab([1.0, 2.0, 3.0, 4.0], 0.0, 0.0, 1.0, 2)
    assert text.startswith("x = [\n0.00000000000000000000\t1.00000000000000000000\t];")
    assert "[X, Y] = meshgrid(x, y);\n" in text
    assert text.endswith("];\nsurf(X, Y, Phi);\naxis equal;\n")
    body = text.split("Phi =[\n")[1].split("];\n")[0]
    assert len(body.splitlines()) == 2


def test_render_matlab_wrong_size():
    with pytest.raises(ValueError):
        render_matlab([1.0, 2.0], 0.0, 0.0, 1.0, 2)


def test_main_prints_eleven_rows(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.endswith("axis equal;\n")
    body = out.split("Phi =[\n")[1].split("];\n")[0]
    rows = body.splitlines()
    assert len(rows) == 11
    assert all(len(row.rstrip("\t").split("\t")) == 11 for row in rows)