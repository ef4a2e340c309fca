import pytest

from termarcade.obstacles import Obstacle, ObstacleField


def test_obstacle_lane_properties():
    obstacle = Obstacle(3, 4)
    obstacle.set_lane_properties(0.5, -1)
    assert (obstacle.speed, obstacle.direction) == (0.5, -1)
    assert obstacle.active is True


def test_field_size():
    field = ObstacleField(300)
    assert len(field) == 300
    assert all(o.cell == (0, 0) for o in field)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ObstacleField(-1)


def test_set_lane_positions():
    field = ObstacleField(60)
    field.set_lane(28, 55, -28, 2, 0.08, -1)
    lane = field.obstacles[28:55]
    assert [o.col for o in lane] == list(range(0, 27))
    assert all(o.row == 2 for o in lane)
    assert all(o.direction == -1 and o.speed == 0.08 for o in lane)
    assert field[27].cell == (0, 0)
    assert field[55].speed == 0.0


def test_set_lane_out_of_range():
    field = ObstacleField(10)
    with pytest.raises(IndexError):
        field.set_lane(5, 11, 0, 1, 0.1, 1)
    assert all(o.speed == 0.0 for o in field)


def test_update_moves_by_speed_and_direction():
    field = ObstacleField(4)
    field.set_lane(0, 2, 5, 1, 0.5, -1)
    field.set_lane(2, 4, 5, 3, 0.5, 1)
    field.update()
    field.update()
    assert [o.x for o in field] == [4, 5, 8, 9]
    assert [o.y for o in field] == [1, 1, 3, 3]


def test_unset_obstacles_do_not_move():
    field = ObstacleField(3)
    field.update()
    assert [o.x for o in field] == [0, 0, 0]