import logging

import requests
from flask import flash

from showcase.core.config import resolve_image_url
from showcase.core.logging_service import LoggingService
from .cards import ItemCard

logger = logging.getLogger(__name__)


def _no_image(path):
    return ''


def card_resolver(screen):
    return resolve_image_url if screen.has_images else _no_image


def load_screen_cards(client, screen):
    """Fetch the whole collection for a screen and wrap each record in an ItemCard.

    Returns (cards, failed). A failed fetch flashes an error toast and yields no cards.
    """
    try:
        records = client.service(screen.service_name).list()
    except requests.RequestException as e:
        LoggingService.error(screen.name, f"Failed to load {screen.plural.lower()}", {'error': str(e)})
        flash(f"Failed to load {screen.plural.lower()}", 'error')
        return [], True

    resolver = card_resolver(screen)
    cards = [
        ItemCard(screen.card_item(record), index=i, image_resolver=resolver)
        for i, record in enumerate(records)
        if isinstance(record, dict)
    ]
    return cards, False
