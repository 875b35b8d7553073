from growth import Canvas, CollisionDetector, Vector2D, lines_intersect, segments_intersect
from growth.collision import ANTICLOCKWISE, CLOCKWISE, COLLINEAR, are_adjacent, on_segment, orientation
from growth.line import Line


def seg(x1, y1, x2, y2):
    return Vector2D(x1, y1), Vector2D(x2, y2)


def make_line(x1, y1, x2, y2, seed_id=0, index=0, parent=None, active=True):
    return Line(
        origin=Vector2D(x1, y1),
        tip=Vector2D(x2, y2),
        angle=0.0,
        seed_id=seed_id,
        index=index,
        generation=0 if parent is None else 1,
        parent=parent,
        active=active,
    )


def traversal(lines):
    def for_each_line_until_true(visitor):
        for line in lines:
            if visitor(line, None):
                return True
        return False
    return for_each_line_until_true


def always_visible(x, y):
    return True


class TestOrientation:
    def test_three_cases(self) -> None:
        p, q = Vector2D(0, 0), Vector2D(10, 0)
        assert orientation(p, q, Vector2D(5, 0)) == COLLINEAR
        assert orientation(p, q, Vector2D(5, 5)) != orientation(p, q, Vector2D(5, -5))
        assert {orientation(p, q, Vector2D(5, 5)), orientation(p, q, Vector2D(5, -5))} == {
            CLOCKWISE, ANTICLOCKWISE
        }

    def test_on_segment_is_inclusive(self) -> None:
        assert on_segment(Vector2D(0, 0), Vector2D(0, 0), Vector2D(10, 10))
        assert on_segment(Vector2D(0, 0), Vector2D(10, 10), Vector2D(10, 10))
        assert not on_segment(Vector2D(0, 0), Vector2D(11, 5), Vector2D(10, 10))


class TestSegmentsIntersect:
    def test_crossing_diagonals(self) -> None:
        assert segments_intersect(*seg(0, 0, 10, 10), *seg(0, 10, 10, 0))

    def test_parallel_segments(self) -> None:
        assert not segments_intersect(*seg(0, 0, 10, 0), *seg(0, 5, 10, 5))

    def test_collinear_overlap(self) -> None:
        assert segments_intersect(*seg(0, 0, 10, 0), *seg(5, 0, 15, 0))

    def test_collinear_disjoint(self) -> None:
        assert not segments_intersect(*seg(0, 0, 4, 0), *seg(5, 0, 15, 0))

    def test_touching_endpoints(self) -> None:
        assert segments_intersect(*seg(0, 0, 10, 0), *seg(10, 0, 10, 10))

    def test_t_junction(self) -> None:
        assert segments_intersect(*seg(0, 0, 10, 0), *seg(5, 0, 5, 10))

    def test_near_miss(self) -> None:
        assert not segments_intersect(*seg(0, 0, 10, 0), *seg(5, 1, 5, 10))

    def test_degenerate_point_on_segment(self) -> None:
        assert segments_intersect(*seg(0, 0, 10, 0), *seg(3, 0, 3, 0))

    def test_lines_use_origin_and_tip(self) -> None:
        a = make_line(0, 0, 10, 10)
        b = make_line(0, 10, 10, 0, index=1)
        assert lines_intersect(a, b)


class TestAdjacency:
    def test_self_parent_and_child(self) -> None:
        parent = make_line(0, 0, 0, 10, index=0)
        child = make_line(0, 5, 5, 5, index=1, parent=0)
        other = make_line(0, 0, 1, 1, index=2)
        assert are_adjacent(parent, parent)
        assert are_adjacent(child, parent)
        assert are_adjacent(parent, child)
        assert not are_adjacent(parent, other)

    def test_same_indices_in_other_seed_are_not_adjacent(self) -> None:
        parent = make_line(0, 0, 0, 10, seed_id=0, index=0)
        lookalike = make_line(0, 5, 5, 5, seed_id=1, index=1, parent=0)
        assert not are_adjacent(parent, lookalike)


class TestCollisionDetector:
    def test_parent_and_child_never_collide(self) -> None:
        parent = make_line(0, 0, 0, 10, index=0)
        child = make_line(0, 5, 5, 5, index=1, parent=0)
        assert lines_intersect(parent, child)

        detector = CollisionDetector(always_visible)
        forest = traversal([parent, child])
        assert not detector.check_for_collisions(child, forest)
        assert not detector.check_for_collisions(parent, forest)

    def test_grandparent_is_not_excluded(self) -> None:
        root = make_line(0, 0, 0, 10, index=0)
        child = make_line(0, 5, 5, 5, index=1, parent=0)
        grandchild = make_line(5, 5, -1, 5, index=2, parent=1)
        detector = CollisionDetector(always_visible)
        assert detector.check_for_collisions(grandchild, traversal([root, child, grandchild]))

    def test_other_seed_collides(self) -> None:
        line = make_line(0, 0, 10, 10, seed_id=0)
        crossing = make_line(0, 10, 10, 0, seed_id=1)
        detector = CollisionDetector(always_visible)
        assert detector.check_for_collisions(line, traversal([line, crossing]))

    def test_inactive_lines_still_block(self) -> None:
        line = make_line(0, 0, 10, 10)
        stopped = make_line(0, 10, 10, 0, index=1, active=False)
        detector = CollisionDetector(always_visible)
        assert detector.check_for_collisions(line, traversal([line, stopped]))

    def test_offscreen_short_circuits_scan(self) -> None:
        canvas = Canvas(10, 10)
        line = make_line(5, 5, 11, 5)
        visited = []

        def forest(visitor):
            visited.append(visitor)
            return False

        detector = CollisionDetector(canvas.is_visible)
        assert detector.check_for_collisions(line, forest)
        assert visited == []

    def test_clear_path(self) -> None:
        canvas = Canvas(20, 20)
        line = make_line(1, 1, 1, 5)
        far = make_line(10, 10, 15, 15, index=1)
        detector = CollisionDetector(canvas.is_visible)
        assert not detector.check_for_collisions(line, traversal([line, far]))

    def test_scan_stops_at_first_hit(self) -> None:
        line = make_line(0, 0, 10, 10)
        first = make_line(0, 10, 10, 0, index=1)
        second = make_line(0, 5, 10, 5, index=2)
        visited = []

        def forest(visitor):
            for other in (line, first, second):
                visited.append(other)
                if visitor(other, None):
                    return True
            return False

        assert CollisionDetector(always_visible).check_for_collisions(line, forest)
        assert visited == [line, first]


class TestCanvas:
    def test_bounds(self) -> None:
        canvas = Canvas(10, 20)
        assert canvas.is_visible(0, 0)
        assert canvas.is_visible(9.99, 19.99)
        assert not canvas.is_visible(10, 5)
        assert not canvas.is_visible(5, 20)
        assert not canvas.is_visible(-0.01, 5)
        assert not canvas.is_visible(5, -0.01)
