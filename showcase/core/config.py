import os
import re
from dotenv import load_dotenv

load_dotenv(override=True)

_SCHEME_RE = re.compile(r'^https?://', re.IGNORECASE)
_TRAILING_API_RE = re.compile(r'/api/?$', re.IGNORECASE)


class Config:
    """
    Base configuration for Showcase.
    Every value can be overridden through the environment or the Flask app config.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024

    # REST backend that owns achievements, experiences, media and skills
    API_BASE_URL = os.getenv('SHOWCASE_API_BASE_URL', 'http://localhost:5000/api')
    API_TIMEOUT = int(os.getenv('SHOWCASE_API_TIMEOUT', '15'))

    # Local activity log
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    LOG_DB = os.getenv('LOG_DB', os.path.join(DB_DIR, 'showcase_logs.db'))

    # Site settings
    BRAND_NAME = os.getenv('BRAND_NAME', 'Portfolio')
    ADMIN_TITLE = os.getenv('ADMIN_TITLE', 'Portfolio Admin')

    # Origins allowed to fetch the public section embeds
    CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', 'http://localhost:3000').split(',') if o.strip()]

    # Endpoint the admin guard redirects to
    LOGIN_ENDPOINT = os.getenv('SHOWCASE_LOGIN_ENDPOINT', 'admin.login')


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config class, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None:
        return val
    return os.getenv(key, default)


def normalize_base_url(url):
    """Add https:// when no scheme is given and drop a trailing slash."""
    url = (url or '').strip()
    if not url:
        return ''
    if not _SCHEME_RE.match(url):
        url = f'https://{url}'
    return url.rstrip('/')


def backend_origin(url):
    """Origin that serves uploaded assets: the base URL without a single trailing /api segment."""
    url = (url or '').strip()
    if not url:
        return ''
    if not _SCHEME_RE.match(url):
        url = f'https://{url}'
    return _TRAILING_API_RE.sub('', url, count=1).rstrip('/')


def resolve_image_url(image_path, api_base=None):
    """
    Build the absolute URL for an item image.

    Paths under /uploads/ live on the backend and are prefixed with its origin.
    Anything else (absolute URLs, site-local assets) is returned unchanged.
    """
    if not image_path:
        return ''
    if image_path.startswith('/uploads/'):
        if api_base is None:
            api_base = get_config_value('API_BASE_URL', Config.API_BASE_URL)
        return f'{backend_origin(api_base)}{image_path}'
    return image_path
