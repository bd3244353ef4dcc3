"""
Showcase Modules
================

Flask blueprint modules: admin shell, content screens and public sections.
"""

__all__ = ['dashboard', 'content_admin', 'sections']
