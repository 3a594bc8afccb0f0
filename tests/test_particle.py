import math
import random

from cosmosgraph.particle import Particle, hsv_to_rgb, random_bright_color


def test_hsv_primary_hues():
    assert hsv_to_rgb(0.0, 1.0, 1.0) == (255, 0, 0)
    assert hsv_to_rgb(120.0, 1.0, 1.0) == (0, 255, 0)
    assert hsv_to_rgb(240.0, 1.0, 1.0) == (0, 0, 255)


def test_hsv_full_saturation_spans_range():
    for hue in range(0, 360, 15):
        rgb = hsv_to_rgb(float(hue), 1.0, 1.0)
        assert max(rgb) == 255
        assert min(rgb) == 0


def test_hsv_zero_saturation_is_grey():
    r, g, b = hsv_to_rgb(200.0, 0.0, 0.5)
    assert r == g == b


def test_random_bright_color_is_opaque_and_bright():
    rng = random.Random(3)
    for _ in range(50):
        color = random_bright_color(rng)
        assert len(color) == 4
        assert color[3] == 255
        assert all(0 <= c <= 255 for c in color)
        assert max(color[:3]) >= int(0.8 * 255)


def test_same_seed_gives_same_particle():
    a = Particle((0.0, 0.0), random.Random(7))
    b = Particle((0.0, 0.0), random.Random(7))
    assert a.velocity == b.velocity
    assert a.color == b.color
    assert a.size == b.size


def test_new_particle_state():
    particle = Particle((10.0, 20.0), random.Random(1))
    assert particle.pos == (10.0, 20.0)
    assert particle.trail == [(10.0, 20.0)]
    assert particle.life == 1.0
    assert particle.is_alive()
    speed = math.hypot(*particle.velocity)
    assert 5.0 <= speed <= 15.0
    assert 2.0 <= particle.size <= 7.0


def test_update_moves_and_speeds_up():
    particle = Particle((0.0, 0.0), random.Random(2))
    speed_before = math.hypot(*particle.velocity)
    particle.update()
    assert math.hypot(*particle.velocity) > speed_before
    assert particle.pos != (0.0, 0.0)
    assert particle.trail[-1] == particle.pos
    assert particle.life < 1.0


def test_trail_is_capped():
    particle = Particle((0.0, 0.0), random.Random(4))
    for _ in range(25):
        particle.update()
    assert len(particle.trail) == 10
    assert particle.trail[-1] == particle.pos


def test_particle_dies_eventually():
    particle = Particle((0.0, 0.0), random.Random(5))
    for _ in range(50):
        particle.update()
    assert particle.is_alive()
    for _ in range(51):
        particle.update()
    assert not particle.is_alive()


def test_trail_segments_fade_towards_tail():
    particle = Particle((0.0, 0.0), random.Random(6))
    for _ in range(5):
        particle.update()
    segments = list(particle.trail_segments())
    assert len(segments) == len(particle.trail) - 1
    widths = [segment.width for segment in segments]
    assert widths == sorted(widths)
    assert all(width <= particle.size for width in widths)
    assert segments[0].color[3] <= segments[-1].color[3] < 255
    assert segments[-1].end == particle.pos


def test_fresh_particle_has_no_segments():
    particle = Particle((1.0, 1.0), random.Random(8))
    assert list(particle.trail_segments()) == []