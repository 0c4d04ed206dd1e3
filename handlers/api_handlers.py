"""
API Route Handlers for the lobby control plane.

Pure routing layer that delegates to the lobby manager.
Contains no business logic - only request/response handling.
"""

import logging
from flask import jsonify, request

from lobby import CreateResult, StoreError, ValidationError

logger = logging.getLogger(__name__)


def register_api_handlers(app, lobby_manager):
    """
    Register all API route handlers.

    Args:
        app: Flask application instance
        lobby_manager: Lobby lifecycle manager instance
    """

    @app.route('/', methods=['GET'])
    def default():
        """Service banner."""
        return jsonify({
            'service': 'lobby-control-plane',
            'status': 'ok'
        })

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        if lobby_manager.store.ping():
            return jsonify({'status': 'healthy', 'store': 'connected'})
        return jsonify({'status': 'unhealthy', 'store': 'unreachable'}), 503

    @app.route('/new-lobby', methods=['POST'])
    def new_lobby():
        """Create a lobby and launch its hosting task."""
        data = request.get_json(silent=True)

        try:
            # Delegate to lobby manager
            result = lobby_manager.create_lobby(data)
        except ValidationError as e:
            logger.warning(f"Rejected lobby request: {e}")
            return jsonify({'result': CreateResult.ERROR, 'message': str(e)}), 400

        if result == CreateResult.CREATED:
            return jsonify({'result': result}), 201
        return jsonify({'result': result}), 500

    @app.route('/status-lobby/<reference_id>', methods=['GET'])
    def status_lobby(reference_id):
        """Get the status of a lobby."""
        try:
            status = lobby_manager.status_lobby(reference_id)
        except ValidationError as e:
            logger.warning(f"Rejected status request: {e}")
            return jsonify({'status': 'error', 'data': {}, 'message': str(e)}), 400
        except StoreError as e:
            logger.error(f"Error getting status of lobby {reference_id}: {e}")
            return jsonify({'status': 'error', 'data': {}}), 500

        if not status.found:
            return jsonify(status.to_dict()), 404
        return jsonify(status.to_dict())

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        """Handle 405 errors."""
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("API handlers registered successfully")
