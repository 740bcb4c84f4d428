"""
todo_service

Top-level package for the Todo + key/value cache HTTP service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file free of imports; settings and app wiring load lazily from submodules.
