"""
Request middleware for the lobby control plane.

Logs every request with its outcome and timing, and makes sure every
response goes out as JSON.
"""

import logging
import time
from flask import g, request

logger = logging.getLogger(__name__)


def register_middleware(app):
    """
    Register request logging and JSON response hooks.

    Args:
        app: Flask application instance
    """

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.pop('request_started', None)
        duration_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"in {duration_ms:.1f}ms from {request.remote_addr}"
        )
        return response

    @app.after_request
    def force_json(response):
        response.headers['Content-Type'] = 'application/json'
        return response
