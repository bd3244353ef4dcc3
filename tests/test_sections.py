"""
Public portfolio sections: backend data, fallback datasets, the contact
form and the CORS-enabled JSON embeds.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from showcase.core.logging_service import LoggingService
from showcase.modules.sections.fallback import FALLBACK_MEDIA, FALLBACK_SKILL_CATEGORIES

CLIENT_PATH = "showcase.modules.sections.routes.get_api_client"


@pytest.fixture
def sections_backend():
    """Public pages read through this fake client; services[name].list drives each section."""
    fake = MagicMock(name="ApiClient")
    services = {"skills": MagicMock(), "media": MagicMock()}
    for svc in services.values():
        svc.list.return_value = []
    fake.service.side_effect = lambda name: services[name]
    fake.services = services
    with patch(CLIENT_PATH, return_value=fake):
        yield fake


@pytest.fixture
def backend_down(sections_backend):
    for svc in sections_backend.services.values():
        svc.list.side_effect = requests.ConnectionError("backend unreachable")
    return sections_backend


# ---------------------------------------------------------------------------
# 1. Skills
# ---------------------------------------------------------------------------

class TestSkillsSection:

    def test_backend_categories_sorted_by_order(self, client, sections_backend):
        sections_backend.services["skills"].list.return_value = [
            {"title": "Second", "skills": ["B"], "order": 2, "color": "secondary"},
            {"title": "First", "skills": ["A"], "order": 1, "color": "primary"},
        ]
        resp = client.get("/skills")
        assert resp.status_code == 200
        assert resp.data.index(b"First") < resp.data.index(b"Second")
        assert b"Showing fallback data" not in resp.data

    def test_fallback_when_backend_down(self, client, backend_down):
        resp = client.get("/skills")
        assert resp.status_code == 200
        assert b"Failed to load skills data" in resp.data
        assert b"Showing fallback data" in resp.data
        assert b"AI &amp; Data Science" in resp.data

    def test_fallback_dataset_not_mutated(self, client, backend_down):
        before = [dict(c) for c in FALLBACK_SKILL_CATEGORIES]
        client.get("/api/sections/skills")
        assert FALLBACK_SKILL_CATEGORIES == before


# ---------------------------------------------------------------------------
# 2. Media
# ---------------------------------------------------------------------------

class TestMediaSection:

    def test_inactive_items_hidden_and_images_resolved(self, client, sections_backend):
        sections_backend.services["media"].list.return_value = [
            {"title": "Live Talk", "image": "/uploads/talk.png", "order": 1, "isActive": True},
            {"title": "Old Panel", "image": "/uploads/old.png", "order": 2, "isActive": False},
        ]
        resp = client.get("/media")
        assert b"Live Talk" in resp.data
        assert b"Old Panel" not in resp.data
        assert b"https://api.example.com/uploads/talk.png" in resp.data

    def test_fallback_when_backend_down(self, client, backend_down):
        resp = client.get("/media")
        assert b"Failed to load media data" in resp.data
        assert FALLBACK_MEDIA[0]["title"].encode() in resp.data


# ---------------------------------------------------------------------------
# 3. Landing page and contact
# ---------------------------------------------------------------------------

class TestLandingAndContact:

    def test_index_composes_sections(self, client, backend_down):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Skills &amp; Expertise" in resp.data
        assert b"LinkedIn" in resp.data

    def test_contact_page_lists_methods(self, client):
        resp = client.get("/contact")
        assert resp.status_code == 200
        assert b"Speaking Engagements" in resp.data
        assert b"Consultation" in resp.data

    def test_contact_validation(self, client):
        resp = client.post("/contact", data={"name": "Ana", "email": "not-an-email", "message": ""})
        assert resp.status_code == 400
        assert b"Please enter a valid email address" in resp.data
        assert b"Message is required" in resp.data

    def test_contact_success_is_logged(self, app, client):
        resp = client.post("/contact", data={"name": "Ana", "email": "ana@example.com", "message": "Hello"},
                           follow_redirects=True)
        assert resp.status_code == 200
        assert b"Your message has been sent successfully" in resp.data
        with app.app_context():
            entries = LoggingService.recent(source="contact")
        assert entries and "Ana" in entries[0]["message"]


# ---------------------------------------------------------------------------
# 4. JSON embeds
# ---------------------------------------------------------------------------

class TestEmbeds:

    def test_skills_embed(self, client, sections_backend):
        sections_backend.services["skills"].list.return_value = [{"title": "AI", "skills": ["NLP"], "order": 1}]
        data = client.get("/api/sections/skills").get_json()
        assert data == {"items": [{"title": "AI", "skills": ["NLP"], "order": 1}], "fallback": False}

    def test_media_embed_resolves_images(self, client, sections_backend):
        sections_backend.services["media"].list.return_value = [{"title": "T", "image": "/uploads/t.png"}]
        data = client.get("/api/sections/media").get_json()
        assert data["items"][0]["image"] == "https://api.example.com/uploads/t.png"

    def test_embed_fallback_flag(self, client, backend_down):
        data = client.get("/api/sections/media").get_json()
        assert data["fallback"] is True
        assert len(data["items"]) == len(FALLBACK_MEDIA)

    def test_embed_allows_configured_origin(self, client, sections_backend):
        resp = client.get("/api/sections/skills", headers={"Origin": "http://localhost:3000"})
        assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"

    def test_embed_rejects_other_origin(self, client, sections_backend):
        resp = client.get("/api/sections/skills", headers={"Origin": "http://evil.test"})
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_embed_origins_follow_app_config(self, app_factory, sections_backend):
        """CORS_ORIGINS set on the host app replaces the environment default."""
        app = app_factory(config={"CORS_ORIGINS": ["https://embed.example"]})
        client = app.test_client()

        resp = client.get("/api/sections/skills", headers={"Origin": "https://embed.example"})
        assert resp.headers.get("Access-Control-Allow-Origin") == "https://embed.example"

        resp = client.get("/api/sections/media", headers={"Origin": "http://localhost:3000"})
        assert "Access-Control-Allow-Origin" not in resp.headers

    def test_preflight_request(self, client, sections_backend):
        resp = client.options("/api/sections/skills", headers={
            "Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"})
        assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:3000"
        sections_backend.service.assert_not_called()
