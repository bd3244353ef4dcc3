"""
Sections Module
===============

Public portfolio pages:
- / landing page (skills, media, contact)
- /skills, /media, /contact
- /api/sections/skills and /api/sections/media JSON embeds (CORS-enabled)
"""

from flask import Blueprint

sections_bp = Blueprint('sections', __name__, template_folder='templates')

from . import routes

__all__ = ['sections_bp']
