"""Read view of one backend item for the admin grids."""

from showcase.core.config import resolve_image_url


def item_title(item):
    """Explicit title, else "<role> at <organization>", else a placeholder."""
    if item.get('title'):
        return item['title']
    if item.get('role') and item.get('organization'):
        return f"{item['role']} at {item['organization']}"
    return 'Untitled Item'


class ItemCard:
    """Display data for one item; edit/delete controls are rendered by the template."""

    def __init__(self, item, index=0, image_resolver=None):
        self.item = item
        self.index = index
        self.image_resolver = image_resolver or resolve_image_url

    @property
    def item_id(self):
        return self.item.get('_id') or self.item.get('id') or ''

    @property
    def title(self):
        return item_title(self.item)

    @property
    def description(self):
        return self.item.get('description', '')

    @property
    def image_url(self):
        return self.image_resolver(self.item.get('image') or '')

    @property
    def link(self):
        return self.item.get('link')

    @property
    def badges(self):
        """(label, variant) pairs for the fields this item carries."""
        item = self.item
        badges = []
        if item.get('type'):
            badges.append((item['type'], 'secondary'))
        for key in ('year', 'role', 'organization'):
            if item.get(key):
                badges.append((item[key], 'outline'))
        if item.get('icon'):
            badges.append((item['icon'], 'secondary'))
        if item.get('order') is not None:
            badges.append((f"Order: {item['order']}", 'outline'))
        if item.get('isActive') is not None:
            active = item['isActive']
            badges.append(('Active' if active else 'Inactive', 'default' if active else 'destructive'))
        return badges
