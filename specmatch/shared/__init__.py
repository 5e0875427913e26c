"""
Shared utilities module.

Common pieces used across all layers: the Ok/Err result type and settings.
"""

from specmatch.shared.result import Err, Ok, Result

__all__ = ["Ok", "Err", "Result"]
