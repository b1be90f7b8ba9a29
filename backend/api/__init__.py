"""
API package.

Provides the FastAPI application factory, the service container and
HTTP error mapping.
"""

from .app import create_app
from .dependencies import ServiceContainer, RestrictedRepositories

__all__ = ["create_app", "ServiceContainer", "RestrictedRepositories"]
