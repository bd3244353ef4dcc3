"""
Backend session auth helpers.

The backend sets an HttpOnly session cookie on sign-in; the ApiClient
cookie jar carries it on every later call.
"""

import logging
from collections import namedtuple

import requests

logger = logging.getLogger(__name__)

SignInResult = namedtuple('SignInResult', ['ok', 'message'])


def sign_in(client, email, password):
    """POST /auth/signin. Never raises; failures come back as SignInResult(ok=False)."""
    url = f"{client.base_url}/auth/signin"
    try:
        resp = client.http.post(
            url,
            json={'email': email, 'password': password},
            timeout=client.timeout,
        )
    except requests.RequestException as e:
        logger.error("Sign in network error: %s", e)
        return SignInResult(False, str(e) or 'Network error')

    if not resp.ok:
        try:
            data = resp.json()
        except ValueError:
            data = {}
        message = (data or {}).get('message') if isinstance(data, dict) else None
        logger.warning("Sign in failed with status %s", resp.status_code)
        return SignInResult(False, message or 'Signin failed')

    return SignInResult(True, '')


def sign_out(client):
    """POST /auth/signout. Transport errors propagate."""
    client.request('POST', '/auth/signout')


def check_auth(client):
    """GET /auth/me. Any failure counts as not authenticated."""
    try:
        resp = client.http.get(f"{client.base_url}/auth/me", timeout=client.timeout)
    except requests.RequestException as e:
        logger.warning("Auth check error: %s", e)
        return False
    if not resp.ok:
        logger.info("Auth check rejected with status %s", resp.status_code)
    return bool(resp.ok)
