"""
Console menu over FixedVector.

Run with ``python -m src.cli`` or the ``fixvec`` console script.
"""

from src.cli.config import MenuConfig
from src.cli.menu import VectorMenu, main

__all__ = ["MenuConfig", "VectorMenu", "main"]
