"""
Health and error page routes
"""
import logging

from flask import Blueprint, current_app, jsonify, render_template, request

logger = logging.getLogger(__name__)

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health():
    """Liveness check; does not call the task API"""
    return jsonify({
        'status': 'healthy',
        'service': 'task-frontend',
        'task_api_url': current_app.config['TASK_API_URL'],
    }), 200


@health_bp.app_errorhandler(404)
def page_not_found(error):
    """Unknown URLs get the not-found page"""
    logger.info("No route for %s %s", request.method, request.path)
    return render_template('not-found.html', message=f'Page not found: {request.path}'), 404


def init_health(app, limiter=None):
    """Initialize health routes with Flask app"""
    if limiter is not None:
        limiter.exempt(health_bp)
    app.register_blueprint(health_bp)
    return health_bp
