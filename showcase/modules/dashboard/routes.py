"""
Admin Dashboard Routes
======================

Sign-in / sign-out against the backend session endpoints and the tabbed
admin panel. Credentials are checked by the backend; this app only keeps
the backend's session cookie inside the signed Flask session.
"""

import logging
import uuid

import requests
from flask import flash, g, redirect, render_template, request, session, url_for

from showcase.core.api_client import forget_cookies, get_api_client, remember_cookies
from showcase.core.auth import sign_in, sign_out
from showcase.core.config import Config, get_config_value
from showcase.core.logging_service import LoggingService
from showcase.modules.content_admin.listing import load_screen_cards
from showcase.modules.content_admin.screens import SCREENS
from . import dashboard_bp
from .guard import admin_required

logger = logging.getLogger(__name__)

DEFAULT_TAB = 'achievements'


def _safe_next(target):
    """Only follow same-site relative redirects."""
    if target and target.startswith('/') and not target.startswith('//'):
        return target
    return None


@dashboard_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')

        if not email or not password:
            flash('Please enter both email and password', 'error')
            return render_template('dashboard/login.html', email=email), 400

        client = get_api_client()
        result = sign_in(client, email, password)

        if result.ok:
            remember_cookies(client)
            session['admin_email'] = email
            # Scopes in-flight saves before the first one starts
            session['sid'] = uuid.uuid4().hex
            LoggingService.log_user_action('auth', 'sign in', {'email': email})
            flash('Login successful', 'success')
            return redirect(_safe_next(request.args.get('next')) or url_for('admin.dashboard'))

        LoggingService.warning('auth', 'Failed sign in attempt', {'email': email, 'reason': result.message})
        flash(result.message, 'error')
        return render_template('dashboard/login.html', email=email), 401

    return render_template('dashboard/login.html', email='')


@dashboard_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Admin logout route"""
    admin_email = session.get('admin_email', 'Unknown')
    try:
        sign_out(get_api_client())
    except requests.RequestException as e:
        # The local session is dropped regardless
        logger.warning("Backend sign out failed: %s", e)

    forget_cookies()
    session.pop('admin_email', None)
    LoggingService.log_user_action('auth', 'sign out', {'email': admin_email})
    flash('You have been logged out', 'info')
    return redirect(url_for('admin.login'))


@dashboard_bp.route('/')
@dashboard_bp.route('/dashboard')
@admin_required
def dashboard():
    """Tabbed admin panel; ?tab= picks the collection shown"""
    tab = request.args.get('tab', DEFAULT_TAB)
    if tab not in SCREENS:
        tab = DEFAULT_TAB
    screen = SCREENS[tab]

    cards, load_failed = load_screen_cards(g.api_client, screen)

    return render_template(
        'dashboard/panel.html',
        title=get_config_value('ADMIN_TITLE', Config.ADMIN_TITLE),
        screens=list(SCREENS.values()),
        screen=screen,
        active_tab=tab,
        cards=cards,
        load_failed=load_failed,
        recent_activity=LoggingService.recent(10),
        admin_email=session.get('admin_email'),
    )
