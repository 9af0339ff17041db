"""Signed distance function of a closed curve sampled on a regular grid."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vec2 = tuple[float, float]

_CORNERS = ((0, 0), (0, 1), (1, 0), (1, 1))


def interface_point(r: float, t: float) -> Vec2:
    """Return the point at parameter ``t`` on the circle of radius ``r``."""
    return (r * math.cos(t), r * math.sin(t))


def initial_interface(r: float, t0: float, t1: float, n: int) -> list[Vec2]:
    """Sample ``n`` points of the circle for parameters in ``[t0, t1)``."""
    h = (t1 - t0) / n
    return [interface_point(r, t0 + i * h) for i in range(n)]


def distance(p0: Sequence[float], p1: Sequence[float]) -> float:
    """Euclidean distance between two planar points."""
    dx = p0[0] - p1[0]
    dy = p0[1] - p1[1]
    return math.sqrt(dx * dx + dy * dy)


def clockwise(p0: Sequence[float], p1: Sequence[float], p2: Sequence[float]) -> bool:
    """True unless ``p0 -> p1 -> p2`` turns strictly anti-clockwise."""
    det = (p1[0] - p0[0]) * (p2[1] - p0[1])
    det -= (p1[1] - p0[1]) * (p2[0] - p0[0])
    return not det > 0.0


def signed_distance(
    interface: Sequence[Sequence[float]],
    x0: float,
    y0: float,
    h: float,
    n: int,
) -> list[float]:
    """Approximate signed distance on an ``n`` by ``n`` grid.

    The result is flat, indexed by ``j * n + i``.  Grid points not next to
    the interface keep the value 1.0.  Points to the right of the curve's
    direction of travel are positive, points to its left negative.
    """
    phi = [1.0] * (n * n)
    points = list(interface)
    if not points:
        return phi
    for g0, g1 in zip(points, points[1:] + points[:1]):
        ix = int((g0[0] - x0) / h)
        jy = int((g0[1] - y0) / h)
        for di, dj in _CORNERS:
            i, j = ix + di, jy + dj
            if not (0 <= i < n and 0 <= j < n):
                raise ValueError(
                    f"interface point ({g0[0]}, {g0[1]}) lies outside the grid"
                )
            p = (x0 + i * h, y0 + j * h)
            dis = distance(g0, p)
            idx = j * n + i
            if dis < abs(phi[idx]):
                phi[idx] = dis if clockwise(g0, g1, p) else -dis
    return phi


def _fmt(value: float) -> str:
    return f"{value:.20f}\t"


def render_matlab(phi: Sequence[float], x0: float, y0: float, h: float, n: int) -> str:
    """Render the grid and the values as a script that plots the surface."""
    if len(phi) != n * n:
        raise ValueError(f"expected {n * n} values, got {len(phi)}")
    parts = ["x = [\n"]
    parts.extend(_fmt(x0 + i * h) for i in range(n))
    parts.append("];")
    parts.append("y = [\n")
    parts.extend(_fmt(y0 + i * h) for i in range(n))
    parts.append("];")
    parts.append("[X, Y] = meshgrid(x, y);\n")
    parts.append("Phi =[\n")
    for j in range(n):
        parts.append("".join(_fmt(phi[j * n + i]) for i in range(n)) + "\n")
    parts.append("];\n")
    parts.append("surf(X, Y, Phi);\n")
    parts.append("axis equal;\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the signed distance of a circle of radius 0.25 on [-1, 1]^2."""
    x0, x1 = -1.0, 1.0
    y0 = -1.0
    n = 11
    h = (x1 - x0) / (n - 1)
    interface = initial_interface(0.25, 0.0, 2.0 * math.pi, 101)
    phi = signed_distance(interface, x0, y0, h, n)
    print(render_matlab(phi, x0, y0, h, n), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())