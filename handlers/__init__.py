"""
Handlers Module for the lobby control plane.

Contains the web layer (routes and middleware) with no business logic.
Handlers translate between HTTP and the lobby manager.
"""

from .api_handlers import register_api_handlers
from .middleware import register_middleware

__all__ = [
    'register_api_handlers',
    'register_middleware'
]
