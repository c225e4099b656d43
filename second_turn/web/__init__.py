"""
HTTP surface for the game lookup services.
"""

from .app import build_catalog_client, create_app
from .routes import catalog_blueprint

__all__ = [
    "build_catalog_client",
    "catalog_blueprint",
    "create_app",
]
