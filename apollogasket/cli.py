from __future__ import annotations

import argparse
import logging

from . import settings
from .core import GasketConfig, GasketDriver

log = logging.getLogger("apollogasket")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="python -m apollogasket", description="Generate an Apollonian gasket")
    p.add_argument("--size", type=float, default=settings.CANVAS_SIZE, help="Canvas edge in pixels")
    p.add_argument(
        "--tolerance-ratio",
        type=float,
        default=settings.TOLERANCE_RATIO,
        help="Tangency/duplicate tolerance as a fraction of the canvas edge",
    )
    p.add_argument(
        "--min-radius-factor",
        type=float,
        default=settings.MIN_RADIUS_FACTOR,
        help="Reject candidates smaller than this many tolerances",
    )
    p.add_argument("--steps", type=int, default=0, help="Subdivision steps to run before display")
    p.add_argument("--snapshot", type=str, default=None, help="Write a PNG of the packing to this path")
    p.add_argument("--color-by-depth", action="store_true", help="Colour snapshot circles by generation")
    p.add_argument("--no-gui", action="store_true", help="Do not open the interactive window")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if ns.steps < 0:
        p.error("--steps must be >= 0")
    config = GasketConfig(
        canvas_size=ns.size,
        tolerance_ratio=ns.tolerance_ratio,
        min_radius_factor=ns.min_radius_factor,
    )
    try:
        driver = GasketDriver(config)
    except ValueError as e:
        p.error(str(e))

    driver.run(ns.steps)
    log.info("Generated %d circles in %d steps", len(driver.circles), driver.generation)

    if ns.snapshot:
        from .render import save_packing

        path = save_packing(
            driver.snapshot(),
            ns.snapshot,
            canvas_size=config.canvas_size,
            color_by_depth=ns.color_by_depth,
        )
        log.info("Saved snapshot -> %s", path)

    if ns.no_gui:
        return 0

    from .gui.viewer import main as viewer_main

    return viewer_main(driver)


if __name__ == "__main__":
    raise SystemExit(main())
