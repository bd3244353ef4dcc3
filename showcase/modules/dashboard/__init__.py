"""
Dashboard Module
================

Admin shell for Showcase.

Provides:
- Admin sign-in / sign-out against the backend session endpoints
- Tabbed admin panel (achievements, experiences, media, skills)
- admin_required guard for every protected view
"""

from flask import Blueprint

# Blueprint name is 'admin' so login redirects read url_for('admin.login')
dashboard_bp = Blueprint(
    'admin',
    __name__,
    url_prefix='/admin',
    template_folder='templates'
)

from . import routes

__all__ = ['dashboard_bp']
