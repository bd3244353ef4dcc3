from functools import wraps

from flask import g, redirect, request, url_for

from showcase.core.api_client import get_api_client
from showcase.core.auth import check_auth
from showcase.core.config import Config, get_config_value


def admin_required(f):
    """Decorator to require a valid backend session.

    The session is checked once per request; the checked client is left on
    g.api_client for the view to reuse.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        client = get_api_client()
        if not check_auth(client):
            login_endpoint = get_config_value('LOGIN_ENDPOINT', Config.LOGIN_ENDPOINT)
            return redirect(url_for(login_endpoint, next=request.full_path.rstrip('?')))
        g.api_client = client
        return f(*args, **kwargs)
    return decorated_function
