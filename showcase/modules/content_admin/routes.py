"""
Content Admin Routes
====================

Shared create / edit / delete / deactivate views for every ResourceScreen.
The collection list itself is rendered by the admin panel; each mutation
redirects back to it so the list is always re-fetched from the backend.
"""

import uuid

import requests
from flask import abort, flash, g, redirect, render_template, request, session, url_for

from showcase.core.config import resolve_image_url
from showcase.core.logging_service import LoggingService
from showcase.modules.dashboard.guard import admin_required
from . import content_admin_bp
from .cards import ItemCard
from .forms import ItemForm
from .inflight import InFlightGuard, SaveInProgress
from .listing import card_resolver
from .screens import get_screen

save_guard = InFlightGuard()


def _screen_or_404(screen_name):
    screen = get_screen(screen_name)
    if screen is None:
        abort(404)
    return screen


def _panel_url(screen):
    return url_for('admin.dashboard', tab=screen.name)


def _session_key():
    """Stable id for the browser session, used to scope in-flight saves."""
    if 'sid' not in session:
        session['sid'] = uuid.uuid4().hex
    return session['sid']


def _fetch_record(screen, item_id):
    """Load one record for editing; None (with a toast) when it cannot be loaded."""
    try:
        record = g.api_client.service(screen.service_name).get(item_id)
    except requests.RequestException as e:
        LoggingService.error(screen.name, f"Failed to load {screen.singular.lower()} {item_id}", {'error': str(e)})
        flash(f"Failed to load {screen.singular.lower()}", 'error')
        return None
    if not isinstance(record, dict):
        flash(f"{screen.singular} not found", 'error')
        return None
    return record


def _render_form(screen, form, item_id=None, status=200):
    return render_template(
        'content_admin/form.html',
        screen=screen,
        form=form,
        item_id=item_id,
    ), status


def _save(screen, form, item_id, save, action):
    """Run form.submit under the in-flight guard and turn the outcome into a response."""
    key = (_session_key(), screen.name, item_id or 'new')
    try:
        with save_guard.hold(key):
            saved = form.submit(save)
    except SaveInProgress:
        form.release_upload()
        flash(f"A save for this {screen.singular.lower()} is already in progress", 'error')
        return _render_form(screen, form, item_id, status=409)

    if saved:
        LoggingService.log_user_action(screen.name, f"{action} {screen.singular.lower()}")
        flash(f"{screen.singular} {action}d successfully", 'success')
        return redirect(_panel_url(screen))

    if form.error:
        LoggingService.error(screen.name, f"Failed to save {screen.singular.lower()}", {'error': form.error})
        flash(f"Failed to save {screen.singular.lower()}", 'error')
    return _render_form(screen, form, item_id, status=400)


@content_admin_bp.route('/<screen_name>/new', methods=['GET', 'POST'])
@admin_required
def create_item(screen_name):
    """Add form for a new item"""
    screen = _screen_or_404(screen_name)
    form = ItemForm(screen.fields, None, title=f"Add {screen.singular}", image_resolver=resolve_image_url)

    if request.method == 'GET':
        return _render_form(screen, form)

    service = g.api_client.service(screen.service_name)
    form.bind(request.form, request.files)

    def save(payload):
        service.create(screen.payload(payload))

    return _save(screen, form, None, save, 'create')


@content_admin_bp.route('/<screen_name>/<item_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_item(screen_name, item_id):
    """Edit form pre-filled from the backend record"""
    screen = _screen_or_404(screen_name)
    title = f"Edit {screen.singular}"

    if request.method == 'GET':
        record = _fetch_record(screen, item_id)
        if record is None:
            return redirect(_panel_url(screen))
        form = ItemForm(screen.fields, screen.form_item(record), title=title, image_resolver=resolve_image_url)
        return _render_form(screen, form, item_id)

    # Submitted values replace every field; only the stored image path comes from the page
    item = {'_id': item_id, 'image': request.form.get('current_image', '')}
    form = ItemForm(screen.fields, item, title=title, image_resolver=resolve_image_url)
    service = g.api_client.service(screen.service_name)
    form.bind(request.form, request.files)

    def save(payload):
        service.update(item_id, screen.payload(payload))

    return _save(screen, form, item_id, save, 'update')


@content_admin_bp.route('/<screen_name>/<item_id>/delete', methods=['GET', 'POST'])
@admin_required
def delete_item(screen_name, item_id):
    """Confirmation page (GET) and confirmed delete (POST with confirm=yes)"""
    screen = _screen_or_404(screen_name)

    if request.method == 'GET':
        record = _fetch_record(screen, item_id)
        if record is None:
            return redirect(_panel_url(screen))
        card = ItemCard(screen.card_item(record), image_resolver=card_resolver(screen))
        return render_template('content_admin/confirm_delete.html', screen=screen, card=card, item_id=item_id)

    if request.form.get('confirm') != 'yes':
        flash('Delete cancelled', 'info')
        return redirect(_panel_url(screen))

    try:
        g.api_client.service(screen.service_name).delete(item_id)
    except requests.RequestException as e:
        LoggingService.error(screen.name, f"Failed to delete {screen.singular.lower()} {item_id}", {'error': str(e)})
        flash(f"Failed to delete {screen.singular.lower()}", 'error')
        return redirect(_panel_url(screen))

    LoggingService.log_user_action(screen.name, f"delete {screen.singular.lower()}", {'id': item_id})
    flash(f"{screen.singular} deleted successfully", 'success')
    return redirect(_panel_url(screen))


@content_admin_bp.route('/<screen_name>/<item_id>/deactivate', methods=['POST'])
@admin_required
def deactivate_item(screen_name, item_id):
    """Soft delete: the backend keeps the record but marks it inactive"""
    screen = _screen_or_404(screen_name)
    if not screen.supports_deactivate:
        abort(404)

    try:
        g.api_client.service(screen.service_name).deactivate(item_id)
    except requests.RequestException as e:
        LoggingService.error(screen.name, f"Failed to deactivate {screen.singular.lower()} {item_id}",
                             {'error': str(e)})
        flash(f"Failed to deactivate {screen.singular.lower()}", 'error')
        return redirect(_panel_url(screen))

    LoggingService.log_user_action(screen.name, f"deactivate {screen.singular.lower()}", {'id': item_id})
    flash(f"{screen.singular} deactivated", 'success')
    return redirect(_panel_url(screen))
