import math
import random

import pytest

from flocksim.core.agents.bird import Bird
from flocksim.core.rules import (
    apply_alignment,
    apply_cohesion,
    apply_separation,
    avoid_boundaries,
    avoid_predator,
    avoid_speeding,
    in_view,
)
from flocksim.core.vectors import Vector2


def test_in_view_uses_heading_cone(bird):
    assert in_view(bird, Vector2(100, 110), math.pi / 2)
    assert in_view(bird, Vector2(105, 101), math.pi / 2)
    assert not in_view(bird, Vector2(100, 90), math.pi / 2)


def test_separation_points_away_from_close_neighbor(bird):
    neighbor = Bird((101, 100), (0, 3))

    steering = apply_separation([neighbor], bird, separation_distance=5, separation=2)

    assert steering.x == pytest.approx(-2.0)
    assert steering.y == pytest.approx(0.0)


def test_separation_ignores_neighbors_beyond_inner_radius(bird):
    neighbor = Bird((108, 100), (0, 3))

    steering = apply_separation([neighbor], bird, separation_distance=5, separation=1)

    assert (steering.x, steering.y) == (0, 0)


def test_separation_closest_neighbor_dominates(bird):
    near = Bird((101, 100), (0, 3))
    far = Bird((97, 100), (0, 3))

    steering = apply_separation([near, far], bird, separation_distance=5, separation=1)

    assert steering.x == pytest.approx(-1 + 1 / 3)
    assert steering.x < 0


def test_alignment_pulls_toward_mean_velocity(bird):
    neighbors = [Bird((110, 100), (1, 0)), Bird((100, 110), (3, 0))]

    steering = apply_alignment(neighbors, bird, alignment=0.5)

    assert steering.x == pytest.approx(1.0)
    assert steering.y == pytest.approx(-1.5)


def test_cohesion_pulls_toward_center_of_mass(bird):
    neighbors = [Bird((110, 100), (1, 0)), Bird((100, 110), (3, 0))]

    steering = apply_cohesion(neighbors, bird, cohesion=0.1)

    assert steering.x == pytest.approx(0.5)
    assert steering.y == pytest.approx(0.5)


@pytest.mark.parametrize("rule", [apply_alignment, apply_cohesion])
def test_rules_without_neighbors_return_zero(rule, bird):
    steering = rule([], bird, 1.0)
    assert (steering.x, steering.y) == (0, 0)


def test_rules_do_not_alias_inputs(bird):
    neighbor = Bird((101, 100), (1, 1))

    steering = apply_alignment([neighbor], bird, 1.0)
    steering += Vector2(10, 10)

    assert (bird.velocity.x, bird.velocity.y) == (0, 3)
    assert (neighbor.velocity.x, neighbor.velocity.y) == (1, 1)


def test_avoid_predator_flees_visible_predator(bird):
    predator = Bird((100, 103), (0, -2))

    steering = avoid_predator([bird], bird, 0, predator, separation_distance=5, view_angle=math.pi / 2)

    assert steering.x == pytest.approx(0.0)
    assert steering.y == pytest.approx(-10.0)


def test_avoid_predator_ignores_predator_behind(bird):
    predator = Bird((100, 97), (0, 2))

    steering = avoid_predator([bird], bird, 0, predator, separation_distance=5, view_angle=math.pi / 2)

    assert (steering.x, steering.y) == (0, 0)


def test_avoid_predator_ignores_distant_predator(bird):
    predator = Bird((100, 130), (0, 2))

    steering = avoid_predator([bird], bird, 0, predator, separation_distance=5, view_angle=math.pi)

    assert (steering.x, steering.y) == (0, 0)


def test_avoid_predator_rejects_index_outside_flock(bird):
    predator = Bird((100, 103), (0, 2))

    with pytest.raises(IndexError):
        avoid_predator([bird], bird, 3, predator, separation_distance=5, view_angle=math.pi)


@pytest.mark.parametrize(
    "velocity, expected",
    [
        ((30, 40), (3, 4)),
        ((0.3, 0.4), (1.2, 1.6)),
        ((1.8, 2.4), (1.8, 2.4)),
        ((0, 0), (2, 0)),
    ],
)
def test_avoid_speeding_rescales_into_range(velocity, expected):
    bird = Bird((0, 0), velocity)

    avoid_speeding(bird, max_speed=5, min_speed=2)

    assert bird.velocity.x == pytest.approx(expected[0])
    assert bird.velocity.y == pytest.approx(expected[1])


def test_avoid_speeding_preserves_direction():
    rng = random.Random(11)
    for _ in range(200):
        velocity = Vector2(rng.uniform(-20, 20), rng.uniform(-20, 20))
        bird = Bird((0, 0), velocity)

        avoid_speeding(bird, max_speed=5, min_speed=2)

        speed = bird.velocity.length()
        assert 2 - 1e-9 <= speed <= 5 + 1e-9
        if velocity.length() > 0:
            before = velocity / velocity.length()
            after = bird.velocity / speed
            assert after.x == pytest.approx(before.x)
            assert after.y == pytest.approx(before.y)


def test_avoid_boundaries_turns_bird_back_from_edge():
    bird = Bird((1, 100), (-3, 0))

    avoid_boundaries(bird, 200, 200)

    assert bird.velocity.x > 0
    assert 0 <= bird.position.x + bird.velocity.x <= 200


def test_avoid_boundaries_steers_inside_margin():
    bird = Bird((195, 100), (1, 0))

    avoid_boundaries(bird, 200, 200)

    assert bird.velocity.x == pytest.approx(0.5)


def test_avoid_boundaries_leaves_interior_alone(bird):
    avoid_boundaries(bird, 200, 200)

    assert (bird.position.x, bird.position.y) == (100, 100)
    assert (bird.velocity.x, bird.velocity.y) == (0, 3)


def test_avoid_boundaries_clamps_stray_position():
    bird = Bird((-5, 300), (0, 0))

    avoid_boundaries(bird, 200, 200)

    assert (bird.position.x, bird.position.y) == (0, 200)


@pytest.mark.parametrize("width, height", [(200, 150), (30, 500), (3, 2)])
def test_avoid_boundaries_keeps_birds_on_canvas(width, height):
    rng = random.Random(5)
    birds = [Bird((rng.uniform(0, width), rng.uniform(0, height)),
                  (rng.uniform(-20, 20), rng.uniform(-20, 20))) for _ in range(30)]

    for _ in range(300):
        for bird in birds:
            bird.velocity += Vector2(rng.uniform(-3, 3), rng.uniform(-3, 3))
            avoid_boundaries(bird, width, height)
            bird.position += bird.velocity * 0.9

            assert -1e-9 <= bird.position.x <= width + 1e-9
            assert -1e-9 <= bird.position.y <= height + 1e-9


def test_avoid_speeding_restores_speed_lost_at_boundary():
    bird = Bird((1, 1), (5, 0))

    avoid_boundaries(bird, 3, 2)
    assert bird.velocity.length() < 2

    avoid_speeding(bird, max_speed=5, min_speed=2)
    assert bird.velocity.length() == pytest.approx(2)
    assert bird.velocity.x < 0


def test_avoid_speeding_leaves_previous_vector_untouched():
    bird = Bird((0, 0), (30, 40))
    previous = bird.velocity

    avoid_speeding(bird, max_speed=5, min_speed=2)

    assert bird.velocity is not previous
    assert (previous.x, previous.y) == (30, 40)
    assert (bird.velocity.x, bird.velocity.y) == pytest.approx((3, 4))
