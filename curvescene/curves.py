"""Bezier, Hermite and Catmull-Rom curves and splines over 3D points."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

ArrayLike = Sequence[float] | np.ndarray


def _vec3(value: ArrayLike) -> np.ndarray:
    vector = np.array(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _zero() -> np.ndarray:
    return np.zeros(3)


def _lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    return a + (b - a) * t


class Bezier:
    """A single cubic Bezier curve evaluated by de Casteljau's algorithm."""

    def __init__(self) -> None:
        self._points: List[np.ndarray] = []

    def add(self, begin, control_point0, control_point1, end) -> None:
        """Replace the curve's points with a begin, two control points and an end."""
        self._points = [
            _vec3(begin),
            _vec3(control_point0),
            _vec3(control_point1),
            _vec3(end),
        ]

    def evaluate(self, t: float) -> np.ndarray:
        """Point on the curve at ``t``; the zero vector when no curve is set."""
        if len(self._points) == 3:
            return self.evaluate2(t)
        if len(self._points) == 4:
            return self.evaluate3(t)
        return _zero()

    def evaluate2(self, t: float) -> np.ndarray:
        """Quadratic evaluation over the first three points."""
        a, b, c = self._points[:3]
        ab = _lerp(a, b, t)
        bc = _lerp(b, c, t)
        return _lerp(ab, bc, t)

    def evaluate3(self, t: float) -> np.ndarray:
        """Cubic evaluation over all four points."""
        a, b, c, d = self._points[:4]
        ab = _lerp(a, b, t)
        bc = _lerp(b, c, t)
        cd = _lerp(c, d, t)
        abc = _lerp(ab, bc, t)
        bcd = _lerp(bc, cd, t)
        return _lerp(abc, bcd, t)


class BezierSpline:
    """A chain of cubic Bezier curves built from groups of four points."""

    def __init__(self) -> None:
        self._curves: List[Bezier] = []
        self._pending: List[np.ndarray] = []

    def add(self, position) -> None:
        """Queue a point; every fourth point completes a new curve segment."""
        self._pending.append(_vec3(position))
        if len(self._pending) == 4:
            curve = Bezier()
            curve.add(*self._pending)
            self._curves.append(curve)
            self._pending.clear()

    def evaluate(self, t: float) -> np.ndarray:
        """Point at ``t`` over the whole spline, each curve taking an equal share."""
        if not self._curves:
            return _zero()
        spline_t = len(self._curves) * t
        index = int(spline_t)
        if index >= len(self._curves):
            return self._curves[-1].evaluate(1.0)
        if index < 0:
            raise IndexError(f"parameter {t} lies before the start of the spline")
        return self._curves[index].evaluate(spline_t - index)


class Hermite:
    """A single Hermite curve from a begin point and tangent to an end point and tangent."""

    def __init__(self) -> None:
        self.begin = _zero()
        self.tangent_u = _zero()
        self.end = _zero()
        self.tangent_v = _zero()

    def set(self, begin, tangent_u, end, tangent_v) -> None:
        """Set both end points and their tangents."""
        self.begin = _vec3(begin)
        self.tangent_u = _vec3(tangent_u)
        self.end = _vec3(end)
        self.tangent_v = _vec3(tangent_v)

    def evaluate(self, t: float) -> np.ndarray:
        """Point on the curve at ``t``."""
        return self.evaluate3(self.begin, self.tangent_u, self.end, self.tangent_v, t)

    @staticmethod
    def evaluate3(begin, tangent_u, end, tangent_v, t: float) -> np.ndarray:
        """Evaluate the curve as a cubic Bezier whose inner points follow the tangents."""
        a = _vec3(begin)
        d = _vec3(end)
        b = a + _vec3(tangent_u)
        c = d - _vec3(tangent_v)
        ab = _lerp(a, b, t)
        bc = _lerp(b, c, t)
        cd = _lerp(c, d, t)
        abc = _lerp(ab, bc, t)
        bcd = _lerp(bc, cd, t)
        return _lerp(abc, bcd, t)


class HermiteSpline:
    """A chain of Hermite curves through points with a tangent at each."""

    def __init__(self) -> None:
        self._positions: List[np.ndarray] = []
        self._tangents: List[np.ndarray] = []

    def add(self, position, tangent) -> None:
        """Append a point with its tangent."""
        self._positions.append(_vec3(position))
        self._tangents.append(_vec3(tangent))

    def evaluate(self, t: float) -> np.ndarray:
        """Point at ``t``; the zero vector with fewer than two points."""
        count = len(self._positions)
        if count < 2:
            return _zero()
        spline_t = (count - 1) * t
        index = int(spline_t)
        if index >= count - 1:
            return self._positions[-1].copy()
        if index < 0:
            raise IndexError(f"parameter {t} lies before the start of the spline")
        return Hermite.evaluate3(
            self._positions[index],
            self._tangents[index],
            self._positions[index + 1],
            self._tangents[index + 1],
            spline_t - index,
        )


class CatmullRomSpline:
    """A cardinal spline through points; tension 0.5 gives Catmull-Rom tangents."""

    def __init__(self, tension: float = 0.5) -> None:
        self._points: List[np.ndarray] = []
        self.tension = tension

    def add(self, point) -> None:
        """Append a point the spline passes through."""
        self._points.append(_vec3(point))

    def evaluate(self, t: float) -> np.ndarray:
        """Point on the spline at ``t``."""
        return self.evaluate3(t)

    def evaluate3(self, t: float) -> np.ndarray:
        """Evaluate via a Hermite spline; the zero vector with fewer than three points."""
        if len(self._points) < 3:
            return _zero()
        factor = 1.0 - self.tension
        spline = HermiteSpline()
        spline.add(self._points[0], _zero())
        for prev, point, nxt in zip(self._points, self._points[1:], self._points[2:]):
            spline.add(point, (nxt - prev) * factor)
        spline.add(self._points[-1], _zero())
        return spline.evaluate(t)