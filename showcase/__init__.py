"""
Showcase - Portfolio Site with Admin Dashboard
==============================================

A Flask portfolio site whose content (achievements, experiences, media,
skill categories) lives in an external REST backend, with:
- Public sections with built-in fallback content
- Admin sign-in against the backend session endpoints
- Generic create / edit / delete screens for every collection

Usage:
    from showcase import Showcase

    app = Flask(__name__)
    Showcase(app)
"""

__version__ = '0.1.0'

from .extension import Showcase

__all__ = ['Showcase']
