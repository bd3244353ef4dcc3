"""
Showcase Flask extension: wires config defaults, blueprints, error pages
and template context into a host Flask app.
"""

import logging
import os
from datetime import datetime

from flask import Blueprint, flash, jsonify, redirect, render_template, request
from flask_cors import CORS

from .core.config import Config
from .core.logging_service import LoggingService

logger = logging.getLogger(__name__)

# Layout, error pages and /health
core_bp = Blueprint('showcase', __name__, template_folder='templates')

CONFIG_DEFAULTS = [
    'SECRET_KEY', 'MAX_CONTENT_LENGTH', 'API_BASE_URL', 'API_TIMEOUT', 'DB_DIR', 'LOG_DB',
    'BRAND_NAME', 'ADMIN_TITLE', 'CORS_ORIGINS', 'LOGIN_ENDPOINT',
]

DEFAULT_FEATURES = {
    'admin': True,
    'sections': True,
}


@core_bp.route('/health')
def health():
    return jsonify({'status': 'ok', 'timestamp': datetime.now().isoformat()}), 200


class Showcase:
    """
    Usage:
        app = Flask(__name__)
        Showcase(app, {'brand_name': 'J V Kalyan', 'features': {'sections': True}})
    """

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self._registered = []
        if app is not None:
            self.init_app(app)

    @property
    def features(self):
        features = dict(DEFAULT_FEATURES)
        features.update(self._config.get('features', {}))
        return features

    @property
    def brand_name(self):
        return self._config.get('brand_name') or Config.BRAND_NAME

    def init_app(self, app):
        self._apply_defaults(app)
        self._setup_database_dir(app)
        self._register_blueprints(app)
        self._register_error_handlers(app)
        self._register_context(app)
        app.extensions['showcase'] = self
        logger.info("Showcase initialised with modules: %s", ', '.join(self._registered))

    def get_registered_modules(self):
        return list(self._registered)

    def _apply_defaults(self, app):
        for key in CONFIG_DEFAULTS:
            if app.config.get(key) is None:
                app.config[key] = getattr(Config, key)
        if self._config.get('api_base_url'):
            app.config['API_BASE_URL'] = self._config['api_base_url']
        if not app.config.get('SECRET_KEY'):
            logger.warning("SECRET_KEY is not set; sessions will not survive a restart")
            app.config['SECRET_KEY'] = os.urandom(24).hex()
        app.config.setdefault('SESSION_COOKIE_HTTPONLY', True)
        app.config.setdefault('SESSION_COOKIE_SAMESITE', 'Lax')

    def _setup_database_dir(self, app):
        log_dir = os.path.dirname(app.config['LOG_DB'])
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

    def _register_blueprints(self, app):
        app.register_blueprint(core_bp)
        features = self.features

        if features.get('admin'):
            from .modules.dashboard import dashboard_bp
            from .modules.content_admin import content_admin_bp
            app.register_blueprint(dashboard_bp)
            app.register_blueprint(content_admin_bp)
            self._registered.extend(['dashboard', 'content_admin'])

        if features.get('sections'):
            from .modules.sections import sections_bp
            app.register_blueprint(sections_bp)
            # Embed origins follow this app's CORS_ORIGINS
            CORS(app, resources={r'/api/sections/*': {'origins': app.config['CORS_ORIGINS']}},
                 supports_credentials=False)
            self._registered.append('sections')

    def _register_error_handlers(self, app):

        @app.errorhandler(404)
        def page_not_found(e):
            return render_template('showcase/error.html', code=404, message='Page not found'), 404

        @app.errorhandler(500)
        def internal_server_error(e):
            LoggingService.log_error_with_traceback('server', getattr(e, 'original_exception', None) or e)
            return render_template('showcase/error.html', code=500, message='Something went wrong'), 500

        @app.errorhandler(413)
        def file_too_large(e):
            flash('File is too large. Maximum size is 16MB.', 'error')
            return redirect(request.url)

    def _register_context(self, app):
        brand_name = self.brand_name

        @app.context_processor
        def inject_showcase():
            return {
                'brand_name': brand_name,
                'current_year': datetime.now().year,
                'showcase_features': self.features,
            }
