import itertools

import pytest

from honeycomb import EPSILON, InconsistentCoordinatesError, extend_hex

Hex = extend_hex()


def test_coordinates_is_a_snapshot():
    hex = Hex(1, 2)
    snapshot = hex.coordinates()
    snapshot["x"] = 100
    assert hex.x == 1
    assert hex.coordinates() is not hex.coordinates()


def test_add():
    assert Hex(4, -2).add(Hex(3, -1)).coordinates() == {"x": 7, "y": -3, "z": -4}
    assert (Hex(4, -2) + Hex(3, -1)).coordinates() == {"x": 7, "y": -3, "z": -4}


def test_add_accepts_hex_like_values():
    assert Hex(1, 1).add({"x": 2, "y": -1}).coordinates() == {"x": 3, "y": 0, "z": -3}
    assert Hex(1, 1).add([2, -1]).coordinates() == {"x": 3, "y": 0, "z": -3}


def test_subtract():
    assert Hex(4, -2).subtract(Hex(3, -1)).coordinates() == {"x": 1, "y": -1, "z": 0}
    assert (Hex(4, -2) - Hex(3, -1)).coordinates() == {"x": 1, "y": -1, "z": 0}


@pytest.mark.parametrize(("a", "b"), [((4, -2), (3, -1)), ((0, 0), (-5, 2)), ((1.5, -0.5), (2.25, 3))])
def test_subtract_undoes_add(a, b):
    first, second = Hex(*a), Hex(*b)
    assert first.add(second).subtract(second).coordinates() == first.coordinates()


def test_results_keep_the_receivers_custom_properties():
    result = Hex(1, 2, terrain="forest").add(Hex(1, 1, terrain="water"))
    assert result.terrain == "forest"


def test_equals_compares_coordinates_only():
    assert Hex(1, 2, terrain="forest").equals(Hex(1, 2))
    assert Hex(1, 2) == Hex(1, 2)
    assert Hex(1, 2) != Hex(2, 1)
    assert Hex(1, 2) == extend_hex(size=40)(1, 2)
    assert Hex(1, 2) != "1,2"


def test_hexes_are_unhashable():
    with pytest.raises(TypeError):
        hash(Hex())


def test_set_mutates_in_place():
    hex = Hex(1, 2)
    assert hex.set({"x": 3}) is hex
    assert hex.coordinates() == {"x": 3, "y": 2, "z": -5}

    hex.set(y=-1, label="a")
    assert hex.coordinates() == {"x": 3, "y": -1, "z": -2}
    assert hex.label == "a"


def test_set_from_another_hex():
    hex = Hex(1, 2)
    hex.set(Hex(-4, 1, terrain="water"))
    assert hex.coordinates() == {"x": -4, "y": 1, "z": 3}
    assert hex.terrain == "water"


def test_set_from_sequence_keeps_missing_coordinates():
    hex = Hex(1, 2)
    hex.set([5])
    assert hex.coordinates() == {"x": 5, "y": 2, "z": -7}


def test_set_in_strict_factory_leaves_hex_untouched_on_error():
    hex = extend_hex(strict=True)(1, 2)
    with pytest.raises(InconsistentCoordinatesError):
        hex.set({"x": 3, "z": 0, "label": "a"})
    assert hex.coordinates() == {"x": 1, "y": 2, "z": -3}
    assert not hasattr(hex, "label")


def test_round_scenario():
    rounded = Hex(1.6, 1.3, -2.9).round()
    assert rounded.coordinates() == {"x": 2, "y": 1, "z": -3}
    assert all(isinstance(value, int) for value in rounded.coordinates().values())


@pytest.mark.parametrize(
    ("x", "y"),
    [(1.6, 1.3), (-0.4, 2.7), (0.49, 0.49), (-3.51, 1.2), (10.1, -10.8), (0.2, -0.7)],
)
def test_round_is_valid_and_idempotent(x, y):
    rounded = Hex(x, y).round()
    assert rounded.x + rounded.y + rounded.z == 0
    assert rounded.round() == rounded
    assert rounded.distance(Hex(x, y)) < 1


def test_round_keeps_custom_properties():
    assert Hex(0.2, 0.3, terrain="forest").round().terrain == "forest"


def test_lerp_endpoints():
    a, b = Hex(1, -3), Hex(-4, 2)
    assert a.lerp(b, 0).coordinates() == a.coordinates()
    assert a.lerp(b, 1).coordinates() == b.coordinates()


def test_lerp_midpoint_is_not_rounded():
    assert Hex(0, 0).lerp(Hex(2, -2), 0.5) == Hex(1, -1)
    assert Hex(0, 0).lerp(Hex(1, 0), 0.5).coordinates() == {"x": 0.5, "y": 0, "z": -0.5}


def test_nudge():
    nudged = Hex(1, 2).nudge()
    assert nudged.x == pytest.approx(1 + EPSILON["x"])
    assert nudged.y == pytest.approx(2 + EPSILON["y"])
    assert nudged.z == pytest.approx(-3 + EPSILON["z"])
    assert nudged.round() == Hex(1, 2)


def test_distance():
    assert Hex(0, 0).distance(Hex(3, -1)) == 3
    assert Hex(1, -3).distance(Hex(-2, 4)) == 7


SAMPLE_HEXES = [(0, 0), (3, -1), (-2, 4), (5, 5), (-6, 1)]


@pytest.mark.parametrize(("a", "b"), list(itertools.product(SAMPLE_HEXES, repeat=2)))
def test_distance_is_symmetric_and_half_the_manhattan_sum(a, b):
    first, second = Hex(*a), Hex(*b)
    assert first.distance(first) == 0
    assert first.distance(second) == second.distance(first)
    manhattan = abs(first.x - second.x) + abs(first.y - second.y) + abs(first.z - second.z)
    assert first.distance(second) == manhattan / 2


@pytest.mark.parametrize(("a", "b", "c"), list(itertools.combinations(SAMPLE_HEXES, 3)))
def test_distance_triangle_inequality(a, b, c):
    first, second, third = Hex(*a), Hex(*b), Hex(*c)
    assert first.distance(third) <= first.distance(second) + second.distance(third)


def test_neighbors_are_one_step_away():
    center = Hex(2, -1)
    neighbors = center.neighbors()
    assert len({str(neighbor) for neighbor in neighbors}) == 6
    assert all(center.distance(neighbor) == 1 for neighbor in neighbors)
    assert center.neighbor(0) == Hex(3, -2)


def test_neighbor_rejects_unknown_direction():
    with pytest.raises(ValueError):
        Hex().neighbor(6)


@pytest.mark.parametrize("end", [(4, -1), (-3, 3), (0, 5), (2, -2)])
def test_line_to(end):
    start, goal = Hex(0, 0), Hex(*end)
    line = start.line_to(goal)
    assert len(line) == start.distance(goal) + 1
    assert line[0] == start
    assert line[-1] == goal
    for previous, current in zip(line, line[1:]):
        assert previous.distance(current) == 1


def test_line_to_self():
    assert Hex(1, 1).line_to(Hex(1, 1)) == [Hex(1, 1)]


@pytest.mark.parametrize("other", [None, "not a hex", 3, object()])
def test_equals_is_false_for_values_without_coordinates(other):
    assert not Hex().equals(other)


@pytest.mark.parametrize("method", ["add", "subtract", "distance", "line_to"])
def test_values_without_coordinates_are_rejected(method):
    with pytest.raises(TypeError):
        getattr(Hex(3, -1), method)(None)
    with pytest.raises(TypeError):
        Hex(3, -1).lerp("not a hex", 0.5)


def test_set_takes_constructor_arguments():
    hex = Hex(1, 2, label="a")
    assert hex.set(3, 4) is hex
    assert hex.coordinates() == {"x": 3, "y": 4, "z": -7}
    assert hex.label == "a"

    hex.set(None, -1)
    assert hex.coordinates() == {"x": 3, "y": -1, "z": -2}


def test_set_in_strict_factory_checks_positional_z():
    hex = extend_hex(strict=True)(1, 2)
    assert hex.set(2, 3, -5).coordinates() == {"x": 2, "y": 3, "z": -5}
    with pytest.raises(InconsistentCoordinatesError):
        hex.set(2, 3, 0)
    assert hex.coordinates() == {"x": 2, "y": 3, "z": -5}
