"""In-memory REST backend driven by the CrestaStream browser-automation suite."""

from .__version__ import __version__

__all__ = ["__version__"]
