"""
Showcase Core
=============

Configuration, backend API client, session auth helpers and logging
shared by every Showcase module.
"""

from .config import Config, get_config_value, resolve_image_url
from .database import Database
from .logging_service import LoggingService
from .api_client import ApiClient, get_api_client

__all__ = ['Config', 'get_config_value', 'resolve_image_url', 'Database',
           'LoggingService', 'ApiClient', 'get_api_client']
