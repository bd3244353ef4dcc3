"""
Ready-to-run Showcase application.

Run with:
    flask --app showcase.app run

Visit:
    http://localhost:5000/        - Portfolio
    http://localhost:5000/admin   - Admin panel
"""

import logging
import os

from flask import Flask

from showcase import Showcase
from showcase.core.config import Config


def create_app(config_class=Config, options=None):
    """Application factory"""
    app = Flask(__name__)
    app.config.from_object(config_class)
    Showcase(app, options)
    return app


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    app.run(host='0.0.0.0', port=int(os.getenv('PORT', '8000')), debug=True)
