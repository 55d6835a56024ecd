"""Ear-clipping triangulation of a simple polygon."""

from collections.abc import Sequence


class _Node:
    """Vertex in the circular doubly linked list of a polygon ring."""

    __slots__ = ("i", "x", "y", "prev", "next", "z", "prev_z", "next_z", "steiner")

    def __init__(self, i: int, x: float, y: float) -> None:
        self.i = i
        self.x = x
        self.y = y
        self.prev: "_Node | None" = None
        self.next: "_Node | None" = None
        self.z = 0
        self.prev_z: "_Node | None" = None
        self.next_z: "_Node | None" = None
        self.steiner = False


def _area(p: _Node, q: _Node, r: _Node) -> float:
    """Signed area of the triangle ``p, q, r``."""
    return (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)


def _equals(p1: _Node, p2: _Node) -> bool:
    return p1.x == p2.x and p1.y == p2.y


def _sign(val: float) -> int:
    return (0.0 < val) - (val < 0.0)


def _point_in_triangle(ax, ay, bx, by, cx, cy, px, py) -> bool:
    return (
        (cx - px) * (ay - py) - (ax - px) * (cy - py) >= 0
        and (ax - px) * (by - py) - (bx - px) * (ay - py) >= 0
        and (bx - px) * (cy - py) - (cx - px) * (by - py) >= 0
    )


def _on_segment(p: _Node, q: _Node, r: _Node) -> bool:
    return max(p.x, r.x) >= q.x >= min(p.x, r.x) and max(p.y, r.y) >= q.y >= min(p.y, r.y)


def _intersects(p1: _Node, q1: _Node, p2: _Node, q2: _Node) -> bool:
    o1 = _sign(_area(p1, q1, p2))
    o2 = _sign(_area(p1, q1, q2))
    o3 = _sign(_area(p2, q2, p1))
    o4 = _sign(_area(p2, q2, q1))

    if o1 != o2 and o3 != o4:
        return True
    if o1 == 0 and _on_segment(p1, p2, q1):
        return True
    if o2 == 0 and _on_segment(p1, q2, q1):
        return True
    if o3 == 0 and _on_segment(p2, p1, q2):
        return True
    if o4 == 0 and _on_segment(p2, q1, q2):
        return True
    return False


def _intersects_polygon(a: _Node, b: _Node) -> bool:
    p = a
    while True:
        if (
            p.i != a.i
            and p.next.i != a.i
            and p.i != b.i
            and p.next.i != b.i
            and _intersects(p, p.next, a, b)
        ):
            return True
        p = p.next
        if p is a:
            return False


def _locally_inside(a: _Node, b: _Node) -> bool:
    if _area(a.prev, a, a.next) < 0:
        return _area(a, b, a.next) >= 0 and _area(a, a.prev, b) >= 0
    return _area(a, b, a.prev) < 0 or _area(a, a.next, b) < 0


def _middle_inside(a: _Node, b: _Node) -> bool:
    p = a
    inside = False
    px = (a.x + b.x) / 2
    py = (a.y + b.y) / 2
    while True:
        if (
            (p.y > py) != (p.next.y > py)
            and p.next.y != p.y
            and px < (p.next.x - p.x) * (py - p.y) / (p.next.y - p.y) + p.x
        ):
            inside = not inside
        p = p.next
        if p is a:
            return inside


def _is_valid_diagonal(a: _Node, b: _Node) -> bool:
    return (
        a.next.i != b.i
        and a.prev.i != b.i
        and not _intersects_polygon(a, b)
        and (
            (
                _locally_inside(a, b)
                and _locally_inside(b, a)
                and _middle_inside(a, b)
                and (_area(a.prev, a, b.prev) != 0.0 or _area(a, b.prev, b) != 0.0)
            )
            or (_equals(a, b) and _area(a.prev, a, a.next) > 0 and _area(b.prev, b, b.next) > 0)
        )
    )


def _insert_node(i: int, x: float, y: float, last: "_Node | None") -> _Node:
    p = _Node(i, x, y)
    if last is None:
        p.prev = p
        p.next = p
    else:
        p.next = last.next
        p.prev = last
        last.next.prev = p
        last.next = p
    return p


def _remove_node(p: _Node) -> None:
    p.next.prev = p.prev
    p.prev.next = p.next
    if p.prev_z is not None:
        p.prev_z.next_z = p.next_z
    if p.next_z is not None:
        p.next_z.prev_z = p.prev_z


def _split_polygon(a: _Node, b: _Node) -> _Node:
    a2 = _Node(a.i, a.x, a.y)
    b2 = _Node(b.i, b.x, b.y)
    an = a.next
    bp = b.prev

    a.next = b
    b.prev = a

    a2.next = an
    an.prev = a2

    b2.next = a2
    a2.prev = b2

    bp.next = b2
    b2.prev = bp

    return b2


def _filter_points(start: _Node, end: "_Node | None" = None) -> _Node:
    """Remove duplicate and collinear points from the ring."""
    if end is None:
        end = start
    p = start
    while True:
        again = False
        if not p.steiner and (_equals(p, p.next) or _area(p.prev, p, p.next) == 0):
            _remove_node(p)
            p = end = p.prev
            if p is p.next:
                break
            again = True
        else:
            p = p.next
        if not (again or p is not end):
            break
    return end


def _sort_linked(lst: _Node) -> _Node:
    """Merge-sort the z-order links of the list by z value."""
    in_size = 1
    while True:
        p = lst
        lst = None
        tail = None
        num_merges = 0

        while p is not None:
            num_merges += 1
            q = p
            p_size = 0
            for _ in range(in_size):
                p_size += 1
                q = q.next_z
                if q is None:
                    break

            q_size = in_size

            while p_size > 0 or (q_size > 0 and q is not None):
                if p_size == 0:
                    e = q
                    q = q.next_z
                    q_size -= 1
                elif q_size == 0 or q is None:
                    e = p
                    p = p.next_z
                    p_size -= 1
                elif p.z <= q.z:
                    e = p
                    p = p.next_z
                    p_size -= 1
                else:
                    e = q
                    q = q.next_z
                    q_size -= 1

                if tail is not None:
                    tail.next_z = e
                else:
                    lst = e
                e.prev_z = tail
                tail = e

            p = q

        tail.next_z = None
        if num_merges <= 1:
            return lst
        in_size *= 2


class _Earcut:
    """Triangulation state for one polygon ring."""

    def __init__(self) -> None:
        self.indices: list[int] = []
        self.hashing = False
        self.min_x = self.min_y = 0.0
        self.inv_size = 0.0

    def run(self, points: Sequence[Sequence[float]]) -> list[int]:
        n = len(points)
        if n == 0:
            return self.indices

        outer = self._linked_list(points, clockwise=True)
        if outer is None or outer.prev is outer.next:
            return self.indices

        self.hashing = 80 - n < 0
        if self.hashing:
            min_x = max_x = outer.x
            min_y = max_y = outer.y
            p = outer.next
            while True:
                min_x = min(min_x, p.x)
                min_y = min(min_y, p.y)
                max_x = max(max_x, p.x)
                max_y = max(max_y, p.y)
                p = p.next
                if p is outer:
                    break
            self.min_x, self.min_y = min_x, min_y
            size = max(max_x - min_x, max_y - min_y)
            self.inv_size = 1.0 / size if size != 0.0 else 0.0

        self._earcut_linked(outer)
        return self.indices

    def _linked_list(self, points: Sequence[Sequence[float]], clockwise: bool) -> "_Node | None":
        n = len(points)
        total = 0.0
        for idx in range(n):
            p1 = points[idx]
            p2 = points[idx - 1]
            total += (p2[0] - p1[0]) * (p1[1] + p2[1])

        order = range(n) if clockwise == (total > 0) else reversed(range(n))
        last = None
        for idx in order:
            last = _insert_node(idx, float(points[idx][0]), float(points[idx][1]), last)

        if last is not None and _equals(last, last.next):
            _remove_node(last)
            last = last.next
        return last

    def _z_order(self, x_: float, y_: float) -> int:
        x = int(32767.0 * (x_ - self.min_x) * self.inv_size)
        y = int(32767.0 * (y_ - self.min_y) * self.inv_size)

        x = (x | (x << 8)) & 0x00FF00FF
        x = (x | (x << 4)) & 0x0F0F0F0F
        x = (x | (x << 2)) & 0x33333333
        x = (x | (x << 1)) & 0x55555555

        y = (y | (y << 8)) & 0x00FF00FF
        y = (y | (y << 4)) & 0x0F0F0F0F
        y = (y | (y << 2)) & 0x33333333
        y = (y | (y << 1)) & 0x55555555

        return x | (y << 1)

    def _index_curve(self, start: _Node) -> None:
        p = start
        while True:
            if not p.z:
                p.z = self._z_order(p.x, p.y)
            p.prev_z = p.prev
            p.next_z = p.next
            p = p.next
            if p is start:
                break
        p.prev_z.next_z = None
        p.prev_z = None
        _sort_linked(p)

    def _is_ear(self, ear: _Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if _area(a, b, c) >= 0:
            return False
        p = ear.next.next
        while p is not ear.prev:
            if _point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y) and _area(p.prev, p, p.next) >= 0:
                return False
            p = p.next
        return True

    def _is_ear_hashed(self, ear: _Node) -> bool:
        a, b, c = ear.prev, ear, ear.next
        if _area(a, b, c) >= 0:
            return False

        min_z = self._z_order(min(a.x, b.x, c.x), min(a.y, b.y, c.y))
        max_z = self._z_order(max(a.x, b.x, c.x), max(a.y, b.y, c.y))

        def blocks(p: _Node) -> bool:
            return (
                p is not ear.prev
                and p is not ear.next
                and _point_in_triangle(a.x, a.y, b.x, b.y, c.x, c.y, p.x, p.y)
                and _area(p.prev, p, p.next) >= 0
            )

        p = ear.next_z
        while p is not None and p.z <= max_z:
            if blocks(p):
                return False
            p = p.next_z

        p = ear.prev_z
        while p is not None and p.z >= min_z:
            if blocks(p):
                return False
            p = p.prev_z

        return True

    def _earcut_linked(self, ear: "_Node | None", pass_: int = 0) -> None:
        if ear is None:
            return
        if not pass_ and self.hashing:
            self._index_curve(ear)

        stop = ear
        while ear.prev is not ear.next:
            prev = ear.prev
            nxt = ear.next

            if self._is_ear_hashed(ear) if self.hashing else self._is_ear(ear):
                self.indices.extend((prev.i, ear.i, nxt.i))
                _remove_node(ear)
                # skipping the next vertex leads to fewer sliver triangles
                ear = nxt.next
                stop = nxt.next
                continue

            ear = nxt
            if ear is stop:
                if not pass_:
                    self._earcut_linked(_filter_points(ear), 1)
                elif pass_ == 1:
                    ear = self._cure_local_intersections(_filter_points(ear))
                    self._earcut_linked(ear, 2)
                elif pass_ == 2:
                    self._split_earcut(ear)
                break

    def _cure_local_intersections(self, start: _Node) -> _Node:
        p = start
        while True:
            a = p.prev
            b = p.next.next
            if (
                not _equals(a, b)
                and _intersects(a, p, p.next, b)
                and _locally_inside(a, b)
                and _locally_inside(b, a)
            ):
                self.indices.extend((a.i, p.i, b.i))
                _remove_node(p)
                _remove_node(p.next)
                p = start = b
            p = p.next
            if p is start:
                break
        return _filter_points(p)

    def _split_earcut(self, start: _Node) -> None:
        a = start
        while True:
            b = a.next.next
            while b is not a.prev:
                if a.i != b.i and _is_valid_diagonal(a, b):
                    c = _split_polygon(a, b)
                    a = _filter_points(a, a.next)
                    c = _filter_points(c, c.next)
                    self._earcut_linked(a)
                    self._earcut_linked(c)
                    return
                b = b.next
            a = a.next
            if a is start:
                return


def earcut(points: Sequence[Sequence[float]]) -> list[int]:
    """Triangulate the simple polygon ``points``.

    Returns a flat list of vertex indices, three per triangle. Degenerate input
    (fewer than three distinct points) yields an empty list.
    """
    return _Earcut().run(points)