"""
Backend API Client
==================

Thin wrapper around the portfolio REST backend.

Four resource collections are exposed (skills, achievements, experiences, media),
each with list / get / create / update / delete and, for image-bearing resources,
deactivate (soft delete). Every request carries the backend session cookies.

Failures are never retried: requests exceptions (ConnectionError, Timeout,
HTTPError from raise_for_status) propagate to the caller unchanged.
"""

import logging
import requests
from flask import current_app, session, has_request_context

from .config import Config, normalize_base_url

logger = logging.getLogger(__name__)

# Flask session key holding the cookies the backend set on sign-in
COOKIE_SESSION_KEY = 'backend_cookies'


def _extract_list(data, keys):
    """Accept a bare array or an array wrapped in one of the known envelope keys."""
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in keys:
            value = data.get(key)
            if isinstance(value, list):
                return value
    return []


def _json_or_none(response):
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


class ResourceService:
    """CRUD calls for one backend collection."""

    def __init__(self, client, resource, list_keys=None, multipart=True):
        self.client = client
        self.resource = resource
        self.list_keys = tuple(list_keys or (resource, 'data'))
        self.multipart = multipart

    def _path(self, item_id=None, action=None):
        path = f"/{self.resource}"
        if item_id is not None:
            path = f"{path}/{item_id}"
        if action:
            path = f"{path}/{action}"
        return path

    def _body(self, payload):
        """Multipart bodies for image resources, JSON for the rest."""
        if not self.multipart:
            return {'json': payload}
        if hasattr(payload, 'fields'):
            return {'data': payload.fields, 'files': payload.files or None}
        return {'data': payload}

    def _call(self, method, path, action, **kwargs):
        try:
            response = self.client.request(method, path, **kwargs)
        except requests.RequestException as e:
            logger.error("Error %s %s: %s", action, path, e)
            raise
        return response

    def list(self):
        response = self._call('GET', self._path(), f"fetching {self.resource}")
        data = _json_or_none(response)
        items = _extract_list(data, self.list_keys)
        if not items and not isinstance(data, list):
            logger.warning("Unexpected %s response shape: %s", self.resource, type(data).__name__)
        return items

    def get(self, item_id):
        response = self._call('GET', self._path(item_id), f"fetching {self.resource} item")
        return _json_or_none(response)

    def create(self, payload):
        response = self._call('POST', self._path(), f"creating {self.resource} item", **self._body(payload))
        return _json_or_none(response)

    def update(self, item_id, payload):
        response = self._call('PUT', self._path(item_id), f"updating {self.resource} item", **self._body(payload))
        return _json_or_none(response)

    def delete(self, item_id):
        response = self._call('DELETE', self._path(item_id), f"deleting {self.resource} item")
        return _json_or_none(response)

    def deactivate(self, item_id):
        response = self._call('PATCH', self._path(item_id, 'deactivate'), f"deactivating {self.resource} item")
        return _json_or_none(response)


class SkillsService(ResourceService):
    """Skill categories use JSON bodies and have no soft delete."""

    def __init__(self, client):
        super().__init__(client, 'skills', list_keys=('skillCategories', 'data'), multipart=False)

    def deactivate(self, item_id):
        raise NotImplementedError("Skill categories cannot be deactivated")

    def add_skill(self, item_id, skill):
        response = self._call('POST', self._path(item_id, 'add-skill'), "adding skill", json={'skill': skill})
        return _json_or_none(response)

    def remove_skill(self, item_id, skill):
        response = self._call('POST', self._path(item_id, 'remove-skill'), "removing skill", json={'skill': skill})
        return _json_or_none(response)


class ApiClient:
    """HTTP client bound to one backend base URL and one cookie jar."""

    def __init__(self, base_url, cookies=None, timeout=15, session=None):
        self.base_url = normalize_base_url(base_url)
        self.timeout = timeout
        self.http = session if session is not None else requests.Session()
        if cookies:
            self.http.cookies.update(cookies)

        self.skills = SkillsService(self)
        self.achievements = ResourceService(self, 'achievements')
        self.experiences = ResourceService(self, 'experiences')
        self.media = ResourceService(self, 'media')

    def service(self, name):
        """Look up a resource service by collection name."""
        svc = getattr(self, name, None)
        if not isinstance(svc, ResourceService):
            raise KeyError(f"Unknown resource: {name}")
        return svc

    def request(self, method, path, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        response = self.http.request(method, f"{self.base_url}{path}", **kwargs)
        response.raise_for_status()
        return response

    def cookies(self):
        """Current backend cookies as a plain dict."""
        return requests.utils.dict_from_cookiejar(self.http.cookies)


def get_api_client():
    """Client for the current request, carrying the backend cookies stored in the Flask session."""
    base_url = current_app.config.get('API_BASE_URL') or Config.API_BASE_URL
    timeout = current_app.config.get('API_TIMEOUT') or Config.API_TIMEOUT
    cookies = session.get(COOKIE_SESSION_KEY) if has_request_context() else None
    return ApiClient(base_url, cookies=cookies, timeout=timeout)


def remember_cookies(client):
    """Persist the client's backend cookies into the Flask session."""
    session[COOKIE_SESSION_KEY] = client.cookies()


def forget_cookies():
    session.pop(COOKIE_SESSION_KEY, None)
