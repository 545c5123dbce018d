"""Classic algorithm implementations for teaching.

The algorithms live in :mod:`algs.core_algorithmic_foundations`; this top
level package only carries the distribution version.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
