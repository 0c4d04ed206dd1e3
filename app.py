"""
Lobby Control Plane - Management API

Flask backend that lets clients request ephemeral multiplayer lobbies.
Each lobby is recorded in the state store and hosted by a task started
through the task launcher; clients poll its status until it is running.
"""

import argparse
import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from config import settings
from cache import MemoryStateStore, RedisStateStore, StateStore
from launcher import EcsTaskLauncher, LocalTaskLauncher, TaskLauncher
from lobby import LobbyManager
from handlers import register_api_handlers, register_middleware
from utils import configure_logging, LOG_PRESETS

logger = logging.getLogger(__name__)


def build_state_store() -> StateStore:
    """Create the state store selected by STORE_BACKEND."""
    if settings.STORE_BACKEND == 'memory':
        return MemoryStateStore()
    if settings.STORE_BACKEND == 'redis':
        return RedisStateStore(
            url=settings.REDIS_URL,
            host=settings.REDIS_HOST,
            port=settings.REDIS_PORT,
            db=settings.REDIS_DB,
            password=settings.REDIS_PASSWORD,
            socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
            ttl_seconds=settings.LOBBY_TTL_SECONDS
        )
    raise ValueError(f"Unknown STORE_BACKEND '{settings.STORE_BACKEND}'")


def build_task_launcher() -> TaskLauncher:
    """Create the task launcher selected by LAUNCHER_BACKEND."""
    if settings.LAUNCHER_BACKEND == 'local':
        return LocalTaskLauncher()
    if settings.LAUNCHER_BACKEND == 'ecs':
        return EcsTaskLauncher(
            cluster=settings.ECS_CLUSTER,
            task_definition=settings.ECS_TASK_DEFINITION,
            container_name=settings.ECS_CONTAINER_NAME,
            subnets=settings.ECS_SUBNETS,
            security_groups=settings.ECS_SECURITY_GROUPS,
            assign_public_ip=settings.ECS_ASSIGN_PUBLIC_IP,
            region=settings.AWS_REGION,
            connect_timeout=settings.ECS_CONNECT_TIMEOUT,
            read_timeout=settings.ECS_READ_TIMEOUT
        )
    raise ValueError(f"Unknown LAUNCHER_BACKEND '{settings.LAUNCHER_BACKEND}'")


def create_app(lobby_manager: Optional[LobbyManager] = None) -> Flask:
    """
    Application factory.

    Args:
        lobby_manager: Manager to serve; built from settings when omitted

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)
    app.config['SECRET_KEY'] = settings.SECRET_KEY

    CORS(app, origins=settings.CORS_ORIGINS.split(','))

    # ProxyFix for deployment behind a load balancer
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1)

    if lobby_manager is None:
        lobby_manager = LobbyManager(build_state_store(), build_task_launcher())

    register_middleware(app)
    register_api_handlers(app, lobby_manager)

    logger.info("Lobby control plane initialized successfully")
    return app


def main(argv=None):
    """Start the management API."""
    parser = argparse.ArgumentParser(description="Starts the lobby management API")
    parser.add_argument(
        '-l', '--log-config',
        default=settings.LOG_CONFIG,
        choices=sorted(LOG_PRESETS),
        help="preset of configurations used by the logs"
    )
    parser.add_argument(
        '-p', '--port',
        type=int,
        default=settings.PORT,
        help="port the HTTP server listens on"
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_config)

    app = create_app()
    logger.info(f"Starting management API on port {args.port}")
    app.run(host='0.0.0.0', port=args.port, debug=args.log_config == 'development', use_reloader=False)


if __name__ == '__main__':
    main()
