"""ASGI entrypoint for auto-discovery tools.

Some CLIs/buildpacks look for `app` in a well-known file (e.g. `app.py`). The
real application lives in `transit_labels.api`; this module re-exports it.
"""

from transit_labels.api import app

__all__ = ["app"]
