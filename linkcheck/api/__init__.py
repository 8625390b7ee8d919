"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from linkcheck.api import app

    uvicorn linkcheck.api:app --reload
"""

from linkcheck.api.app import app

__all__ = ["app"]
