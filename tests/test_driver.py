import logging
import math

import pytest

from apollogasket import generate_packing
from apollogasket.core import (
    DriverState,
    GasketConfig,
    GasketDriver,
    Triplet,
    descartes_residual,
    is_tangent,
)

CANONICAL = GasketConfig(canvas_size=400.0)


def test_initial_state():
    driver = GasketDriver(CANONICAL)
    assert driver.state is DriverState.IDLE
    assert len(driver.circles) == 3
    assert len(driver.frontier) == 1
    assert driver.generation == 0
    outer, left, right = driver.snapshot()
    assert outer.k == pytest.approx(-1.0 / 200.0)
    assert outer.z == complex(200.0, 200.0)
    assert left.k == pytest.approx(1.0 / 100.0)
    assert left.z == complex(100.0, 200.0)
    assert right.z == complex(300.0, 200.0)


def test_first_step_accepts_two_circles():
    driver = GasketDriver(CANONICAL)
    seeds = driver.snapshot()
    added = driver.step()
    assert len(added) == 2
    eps = driver.tolerance.linear
    for c in added:
        assert c.k == pytest.approx(0.015)
        assert c.k > seeds[1].k
        assert c.depth == 1
        assert all(is_tangent(c, s, eps) for s in seeds)
        assert all(abs(c.z - s.z) >= eps or abs(c.radius - s.radius) >= eps for s in seeds)
    ys = sorted(c.z.imag for c in added)
    assert ys[0] == pytest.approx(200.0 - 400.0 / 3.0)
    assert ys[1] == pytest.approx(200.0 + 400.0 / 3.0)
    assert len(driver.frontier) == 6
    assert driver.state is DriverState.IDLE


@pytest.mark.parametrize("steps,total,frontier", [(1, 5, 6), (2, 11, 18), (3, 29, 54)])
def test_reference_counts(steps, total, frontier):
    driver = GasketDriver(CANONICAL)
    driver.run(steps)
    assert len(driver.circles) == total
    assert len(driver.frontier) == frontier
    assert driver.generation == steps


def test_counts_do_not_depend_on_canvas_scale():
    small = GasketDriver(GasketConfig(canvas_size=400.0))
    large = GasketDriver(GasketConfig(canvas_size=960.0))
    small.run(3)
    large.run(3)
    assert len(small.circles) == len(large.circles)
    for a, b in zip(small.snapshot(), large.snapshot()):
        assert b.radius == pytest.approx(a.radius * 2.4)


def test_monotonic_growth():
    driver = GasketDriver(CANONICAL)
    sizes = [len(driver.circles)]
    for _ in range(4):
        added = driver.step()
        sizes.append(len(driver.circles))
        assert sizes[-1] == sizes[-2] + len(added)
        if added:
            assert sizes[-1] > sizes[-2]
    assert sizes == sorted(sizes)


def test_reexpanding_triplet_admits_nothing():
    driver = GasketDriver(CANONICAL)
    seed_triplet = driver.frontier[0]
    driver.step()
    before = driver.snapshot()
    assert driver.expand(seed_triplet, depth=1) == []
    assert driver.snapshot() == before


def test_accepted_quadruples_satisfy_descartes():
    driver = GasketDriver(CANONICAL)
    frontier = list(driver.frontier)
    for depth in range(1, 4):
        nxt = []
        for t in frontier:
            for new in driver.expand(t, depth):
                ks = (t.c1.k, t.c2.k, t.c3.k, new.k)
                scale = sum(ks) ** 2
                assert abs(descartes_residual(*ks)) <= 1e-9 * scale
                nxt.extend(t.children(new))
        frontier = nxt
    assert len(driver.circles) == 29


def test_degenerate_candidates_never_enter_the_set():
    # eps = 40, min radius = 80: the 66.7 px first-level circles are too small
    driver = GasketDriver(GasketConfig(canvas_size=400.0, tolerance_ratio=0.1))
    assert driver.step() == []
    assert len(driver.circles) == 3
    assert driver.exhausted
    assert driver.run(5) == 0
    assert all(c.radius >= driver.tolerance.min_radius for c in driver.circles)


def test_branches_terminate_with_coarse_tolerance():
    driver = GasketDriver(GasketConfig(canvas_size=400.0, tolerance_ratio=0.02))
    driver.run(50)
    assert driver.exhausted
    assert all(c.radius >= driver.tolerance.min_radius for c in driver.circles)


def test_children_triplets():
    driver = GasketDriver(CANONICAL)
    t = driver.frontier[0]
    new = driver.step()[0]
    kids = t.children(new)
    assert kids == (
        Triplet(t.c1, t.c2, new),
        Triplet(t.c1, t.c3, new),
        Triplet(t.c2, t.c3, new),
    )
    assert list(driver.frontier[:3]) == list(kids)


def test_step_is_not_reentrant():
    driver = GasketDriver(CANONICAL)
    driver.state = DriverState.EXPANDING
    with pytest.raises(RuntimeError):
        driver.step()


@pytest.mark.parametrize(
    "config",
    [
        GasketConfig(canvas_size=0.0),
        GasketConfig(canvas_size=float("nan")),
        GasketConfig(tolerance_ratio=-0.1),
        GasketConfig(min_radius_factor=-2.0),
    ],
)
def test_invalid_config(config):
    with pytest.raises(ValueError):
        GasketDriver(config)


def test_run_rejects_negative_steps():
    with pytest.raises(ValueError):
        GasketDriver(CANONICAL).run(-1)


def test_step_logging(caplog):
    caplog.set_level(logging.INFO, logger="apollogasket.core")
    GasketDriver(CANONICAL).step()
    assert "Depth 1: added 2 circles (total: 5, frontier: 6)" in caplog.text


def test_generate_packing_helper():
    circles = generate_packing(2, CANONICAL)
    assert len(circles) == 11
    assert max(c.depth for c in circles) == 2
    assert math.isclose(circles[0].radius, 200.0)
