"""Orientation tests and line-segment intersection in the plane."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Sequence

EPS = 1e-9


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


@dataclass(frozen=True)
class Segment:
    """A closed line segment between two end points."""

    p: Point
    q: Point

    def y_at(self, x: float) -> float:
        """Height of the segment's supporting line at ``x``."""
        if abs(self.p.x - self.q.x) < EPS:
            return self.p.y
        return self.p.y + (self.q.y - self.p.y) * (x - self.p.x) / (self.q.x - self.p.x)


def direction(pi: Point, pj: Point, pk: Point) -> float:
    """Cross product of ``pk - pi`` and ``pj - pi``; its sign gives the turn."""
    x1, y1 = pk.x - pi.x, pk.y - pi.y
    x2, y2 = pj.x - pi.x, pj.y - pi.y
    return x1 * y2 - x2 * y1


def on_segment(p: Point, q: Point, r: Point) -> bool:
    """Whether ``q`` lies in the bounding box of segment ``pr``."""
    return min(p.x, r.x) <= q.x <= max(p.x, r.x) and min(p.y, r.y) <= q.y <= max(p.y, r.y)


def orientation(p: Point, q: Point, r: Point) -> int:
    """0 if collinear, 1 if clockwise, 2 if counter-clockwise."""
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def segments_intersect(p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
    """Whether segment ``p1q1`` meets segment ``p2q2``."""
    o1 = orientation(p1, q1, p2)
    o2 = orientation(p1, q1, q2)
    o3 = orientation(p2, q2, p1)
    o4 = orientation(p2, q2, q1)
    if o1 != o2 and o3 != o4:
        return True
    return (
        (o1 == 0 and on_segment(p1, p2, q1))
        or (o2 == 0 and on_segment(p1, q2, q1))
        or (o3 == 0 and on_segment(p2, p1, q2))
        or (o4 == 0 and on_segment(p2, q1, q2))
    )


def _overlap_1d(l1: float, r1: float, l2: float, r2: float) -> bool:
    l1, r1 = sorted((l1, r1))
    l2, r2 = sorted((l2, r2))
    return max(l1, l2) <= min(r1, r2) + EPS


def _turn(a: Point, b: Point, c: Point) -> int:
    s = (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)
    if abs(s) < EPS:
        return 0
    return 1 if s > 0 else -1


def _touches(a: Segment, b: Segment) -> bool:
    return (
        _overlap_1d(a.p.x, a.q.x, b.p.x, b.q.x)
        and _overlap_1d(a.p.y, a.q.y, b.p.y, b.q.y)
        and _turn(a.p, a.q, b.p) * _turn(a.p, a.q, b.q) <= 0
        and _turn(b.p, b.q, a.p) * _turn(b.p, b.q, a.q) <= 0
    )


def _below(a: Segment, b: Segment) -> bool:
    x = max(min(a.p.x, a.q.x), min(b.p.x, b.q.x))
    return a.y_at(x) < b.y_at(x) - EPS


def _event_order(a: tuple[float, int, int], b: tuple[float, int, int]) -> int:
    if abs(a[0] - b[0]) > EPS:
        return -1 if a[0] < b[0] else 1
    # Openings come before closings at the same abscissa.
    return b[1] - a[1]


def find_intersecting_pair(segments: Sequence[Segment]) -> tuple[int, int] | None:
    """Indices of some pair of intersecting segments, or None if none meet."""
    segs = list(segments)
    events = []
    for index, seg in enumerate(segs):
        events.append((min(seg.p.x, seg.q.x), 1, index))
        events.append((max(seg.p.x, seg.q.x), -1, index))
    events.sort(key=cmp_to_key(_event_order))

    active: list[int] = []
    for _, kind, index in events:
        seg = segs[index]
        if kind == 1:
            lo, hi = 0, len(active)
            while lo < hi:
                mid = (lo + hi) // 2
                if _below(segs[active[mid]], seg):
                    lo = mid + 1
                else:
                    hi = mid
            if lo < len(active) and _touches(segs[active[lo]], seg):
                return active[lo], index
            if lo > 0 and _touches(segs[active[lo - 1]], seg):
                return active[lo - 1], index
            active.insert(lo, index)
        else:
            pos = active.index(index)
            if 0 < pos < len(active) - 1:
                below, above = active[pos - 1], active[pos + 1]
                if _touches(segs[above], segs[below]):
                    return below, above
            del active[pos]
    return None