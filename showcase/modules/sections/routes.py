"""
Public Section Routes
=====================

Read-only portfolio sections backed by the same API client as the admin.
When the backend cannot be reached each section falls back to the built-in
dataset and shows a muted notice instead of an error page.

JSON embeds (/api/sections/...) are CORS-enabled for the app's CORS_ORIGINS;
Showcase.init_app registers Flask-CORS for that path.
"""

import copy
import logging
import re

import requests
from flask import flash, jsonify, redirect, render_template, request, url_for

from showcase.core.api_client import get_api_client
from showcase.core.config import resolve_image_url
from showcase.core.logging_service import LoggingService
from . import sections_bp
from .fallback import CONTACT_METHODS, FALLBACK_MEDIA, FALLBACK_SKILL_CATEGORIES

logger = logging.getLogger(__name__)

# Rejects consecutive dots, leading/trailing dots
EMAIL_REGEX = re.compile(r'^[a-zA-Z0-9_%+-]+(\.[a-zA-Z0-9_%+-]+)*@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$')

CONTACT_SUCCESS = "Thank you! Your message has been sent successfully. I'll get back to you soon."


def _order_key(item):
    try:
        return float(item.get('order') or 0)
    except (TypeError, ValueError):
        return 0


def load_section(resource, fallback, label):
    """
    Fetch one collection for a public section.

    Returns (items, error, used_fallback). Any backend failure swaps in a copy
    of the fallback dataset.
    """
    try:
        items = get_api_client().service(resource).list()
    except requests.RequestException as e:
        logger.error("Failed to fetch %s data: %s", label, e)
        return copy.deepcopy(fallback), f"Failed to load {label} data", True

    items = [i for i in items if isinstance(i, dict)]
    return sorted(items, key=_order_key), None, False


def load_skills():
    return load_section('skills', FALLBACK_SKILL_CATEGORIES, 'skills')


def load_media():
    items, error, used_fallback = load_section('media', FALLBACK_MEDIA, 'media')
    return [i for i in items if i.get('isActive') is not False], error, used_fallback


@sections_bp.app_template_filter('image_url')
def image_url_filter(path):
    return resolve_image_url(path)


# ===== Pages =====

@sections_bp.route('/')
def index():
    """Landing page composing the skills, media and contact sections"""
    skills, skills_error, skills_fallback = load_skills()
    media, media_error, media_fallback = load_media()
    return render_template(
        'sections/index.html',
        skill_categories=skills,
        skills_error=skills_error,
        skills_fallback=skills_fallback,
        media_items=media,
        media_error=media_error,
        media_fallback=media_fallback,
        contact_methods=CONTACT_METHODS,
        contact_form={},
        contact_errors={},
    )


@sections_bp.route('/skills')
def skills():
    categories, error, used_fallback = load_skills()
    return render_template('sections/skills.html', skill_categories=categories,
                           skills_error=error, skills_fallback=used_fallback)


@sections_bp.route('/media')
def media():
    items, error, used_fallback = load_media()
    return render_template('sections/media.html', media_items=items,
                           media_error=error, media_fallback=used_fallback)


def validate_contact(form):
    """Return (cleaned, errors) for a contact form submission."""
    cleaned = {
        'name': (form.get('name') or '').strip(),
        'email': (form.get('email') or '').strip(),
        'message': (form.get('message') or '').strip(),
    }
    errors = {}
    for key, value in cleaned.items():
        if not value:
            errors[key] = f"{key.capitalize()} is required"
    if cleaned['email'] and not EMAIL_REGEX.match(cleaned['email']):
        errors['email'] = 'Please enter a valid email address'
    return cleaned, errors


@sections_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact methods plus a message form"""
    if request.method == 'POST':
        cleaned, errors = validate_contact(request.form)
        if errors:
            flash('Sorry, there was an error sending your message. Please try again.', 'error')
            return render_template('sections/contact.html', contact_methods=CONTACT_METHODS,
                                   contact_form=cleaned, contact_errors=errors), 400

        LoggingService.info('contact', f"Contact message from {cleaned['name']}", cleaned)
        flash(CONTACT_SUCCESS, 'success')
        return redirect(url_for('sections.contact'))

    return render_template('sections/contact.html', contact_methods=CONTACT_METHODS,
                           contact_form={}, contact_errors={})


# ===== Embeds =====

def _embed_response(items, used_fallback):
    payload = []
    for item in items:
        entry = dict(item)
        if entry.get('image'):
            entry['image'] = resolve_image_url(entry['image'])
        payload.append(entry)
    return jsonify({'items': payload, 'fallback': used_fallback})


@sections_bp.route('/api/sections/skills')
def skills_embed():
    items, _, used_fallback = load_skills()
    return _embed_response(items, used_fallback)


@sections_bp.route('/api/sections/media')
def media_embed():
    items, _, used_fallback = load_media()
    return _embed_response(items, used_fallback)
