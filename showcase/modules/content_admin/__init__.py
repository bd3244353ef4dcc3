"""
Content Admin Module
====================

Create / edit / delete screens for the backend collections shown on the
portfolio: achievements, experiences, media and skill categories.

Provides:
- Generic field-descriptor form (forms.ItemForm)
- Generic item card (cards.ItemCard)
- Screen definitions per collection (screens.SCREENS)
- Soft delete (deactivate) for image-bearing collections
"""

from flask import Blueprint

content_admin_bp = Blueprint(
    'content_admin',
    __name__,
    url_prefix='/admin/content',
    template_folder='templates'
)

from . import routes

__all__ = ['content_admin_bp']
