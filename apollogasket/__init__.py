"""Top-level helpers for apollogasket."""

__all__ = [
    "Circle",
    "GasketConfig",
    "GasketDriver",
    "TolerancePolicy",
    "Triplet",
    "seed_circles",
    "generate_packing",
    "save_packing",
    "launch_viewer",
]

from .core import Circle, GasketConfig, GasketDriver, TolerancePolicy, Triplet, seed_circles


def generate_packing(steps: int = 4, config=None):
    """Run ``steps`` subdivision levels and return the resulting circles."""
    driver = GasketDriver(config)
    driver.run(steps)
    return driver.snapshot()


def save_packing(*args, **kwargs):
    """Convenience wrapper for :func:`render.save_packing`."""
    from .render import save_packing as _save
    return _save(*args, **kwargs)


def launch_viewer(*args, **kwargs):
    """Convenience wrapper for :func:`gui.viewer.main`."""
    from .gui.viewer import main as _main
    return _main(*args, **kwargs)
