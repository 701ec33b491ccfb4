"""PySide6 front end for the gasket."""

from .viewer import HAS_GUI, GasketWidget, main

__all__ = ["HAS_GUI", "GasketWidget", "main"]
