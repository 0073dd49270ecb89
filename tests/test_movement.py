import pytest
from core.movement import Direction, delta_for, shift
from core.position import Position

def _body(*pts):
    return [Position(x, y) for x, y in pts]

@pytest.mark.parametrize("direction,expected", [
    (Direction.UP, Position(5, 4)),
    (Direction.DOWN, Position(5, 6)),
    (Direction.LEFT, Position(4, 5)),
    (Direction.RIGHT, Position(6, 5)),
])
def test_single_segment_moves_head(direction, expected):
    body = _body((5, 5))
    shift(body, delta_for(direction))
    assert body == [expected]

@pytest.mark.parametrize("direction", list(Direction))
def test_segments_follow_the_leader(direction):
    body = _body((3, 3), (3, 4), (4, 4), (5, 4))
    before = list(body)
    shift(body, delta_for(direction))

    assert len(body) == len(before)
    assert body[1:] == before[:-1]
    assert body[0] == Position(before[0].x + direction.dx, before[0].y + direction.dy)

def test_shift_mutates_in_place():
    body = _body((1, 1), (1, 2))
    same = body
    shift(body, delta_for(Direction.RIGHT))
    assert same is body
    assert body == _body((2, 1), (1, 1))

def test_duplicated_tail_separates_after_one_shift():
    body = _body((2, 2), (2, 3), (2, 3))
    shift(body, delta_for(Direction.UP))
    assert body == _body((2, 1), (2, 2), (2, 3))

def test_empty_body_rejected():
    with pytest.raises(ValueError):
        shift([], delta_for(Direction.UP))
