"""HTTP layer for the page inspection service.

Run locally with::

    uvicorn backend.api:app --port 5000
"""

from backend.api.app import app, create_app

__all__ = ["app", "create_app"]
