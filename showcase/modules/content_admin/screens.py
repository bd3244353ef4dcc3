"""
Content Screen Definitions
==========================

One ResourceScreen per backend collection. The routes are shared; each
screen only contributes its form fields and the conversions between the
backend record, the form, the card and the save payload.
"""

import re

from .forms import FieldDescriptor

SKILL_SEPARATORS = re.compile(r'[,;\n]+')

ACHIEVEMENT_ICONS = ['Award', 'Users', 'BookOpen', 'Mic', 'Star', 'Trophy']
EXPERIENCE_ICONS = ['Briefcase', 'Building', 'Users', 'Award', 'Lightbulb', 'GraduationCap', 'Target', 'Star']
MEDIA_TYPES = ['Podcast', 'Speaking', 'Content', 'Panel', 'Interview', 'Workshop', 'Webinar', 'Video']
MEDIA_ICONS = ['Play', 'Mic', 'Camera', 'Award', 'Video', 'Users', 'Speaker', 'Headphones']
SKILL_ICONS = ['Brain', 'Code2', 'Users', 'Megaphone', 'Database', 'Cloud']
SKILL_COLORS = ['primary', 'secondary']


def parse_skills(text):
    """Split admin input on commas, semicolons or newlines; trim and drop blanks."""
    return [s.strip() for s in SKILL_SEPARATORS.split(text or '') if s.strip()]


def _to_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        try:
            return int(float(value))
        except (TypeError, ValueError):
            return 0


class ResourceScreen:
    """Admin screen for one backend collection."""

    multipart = True
    supports_deactivate = True
    has_images = True

    def __init__(self, name, singular, plural, fields):
        self.name = name
        self.singular = singular
        self.plural = plural
        self.fields = fields

    @property
    def service_name(self):
        return self.name

    def form_item(self, record):
        """Backend record -> values the form is pre-filled from."""
        return record

    def card_item(self, record):
        """Backend record -> data shown on the card."""
        return record

    def payload(self, form_payload):
        """Form payload -> request body for the API service."""
        return form_payload


class SkillsScreen(ResourceScreen):
    """Skill categories are sent as JSON with the skills as a list."""

    multipart = False
    supports_deactivate = False
    has_images = False

    def form_item(self, record):
        if record is None:
            return None
        skills = record.get('skills') or []
        return {
            '_id': record.get('_id'),
            'title': record.get('title', ''),
            'icon': record.get('icon', ''),
            'color': record.get('color', ''),
            'skills': ', '.join(skills) if isinstance(skills, list) else str(skills),
            'order': record.get('order', 0),
        }

    def card_item(self, record):
        skills = record.get('skills') or []
        return {
            '_id': record.get('_id'),
            'title': record.get('title'),
            'description': f"{len(skills)} skills | Order: {record.get('order', 0)} | Color: {record.get('color', '')}",
            'icon': record.get('icon'),
            'type': record.get('color'),
        }

    def payload(self, form_payload):
        fields = form_payload.fields
        return {
            'title': fields.get('title', ''),
            'icon': fields.get('icon', ''),
            'color': fields.get('color', ''),
            'skills': parse_skills(fields.get('skills', '')),
            'order': _to_int(fields.get('order')),
        }


ACHIEVEMENTS = ResourceScreen('achievements', 'Achievement', 'Achievements', [
    FieldDescriptor('title', 'Title', 'text', required=True, placeholder='Enter achievement title'),
    FieldDescriptor('description', 'Description', 'textarea', required=True, placeholder='Describe the achievement'),
    FieldDescriptor('icon', 'Icon', 'select', required=True, options=ACHIEVEMENT_ICONS),
    FieldDescriptor('order', 'Order', 'number', required=True, placeholder='1'),
    FieldDescriptor('image', 'Image', 'file'),
])

EXPERIENCES = ResourceScreen('experiences', 'Experience', 'Experiences', [
    FieldDescriptor('year', 'Year', 'text', required=True, placeholder='2023 - Present'),
    FieldDescriptor('role', 'Role', 'text', required=True, placeholder='CEO & Founder'),
    FieldDescriptor('organization', 'Organization', 'text', required=True, placeholder='Company Name'),
    FieldDescriptor('description', 'Description', 'textarea', required=True,
                    placeholder='Describe your role and achievements'),
    FieldDescriptor('icon', 'Icon', 'select', required=True, options=EXPERIENCE_ICONS),
    FieldDescriptor('order', 'Order', 'number', required=True, placeholder='1'),
    FieldDescriptor('isActive', 'Active', 'select', required=True, options=['true', 'false']),
    FieldDescriptor('image', 'Image', 'file', required=True),
])

MEDIA = ResourceScreen('media', 'Media Item', 'Media', [
    FieldDescriptor('title', 'Title', 'text', required=True, placeholder='Enter media title'),
    FieldDescriptor('description', 'Description', 'textarea', required=True, placeholder='Describe the media content'),
    FieldDescriptor('type', 'Type', 'select', required=True, options=MEDIA_TYPES),
    FieldDescriptor('icon', 'Icon', 'select', required=True, options=MEDIA_ICONS),
    FieldDescriptor('link', 'Link', 'url', required=True, placeholder='https://example.com'),
    FieldDescriptor('order', 'Order', 'number', required=True, placeholder='1'),
    FieldDescriptor('image', 'Image', 'file'),
])

SKILLS = SkillsScreen('skills', 'Skill Category', 'Skills', [
    FieldDescriptor('title', 'Category Title', 'text', required=True, placeholder='e.g., AI & Data Science'),
    FieldDescriptor('icon', 'Icon', 'select', required=True, options=SKILL_ICONS),
    FieldDescriptor('color', 'Color Theme', 'select', required=True, options=SKILL_COLORS),
    FieldDescriptor('skills', 'Skills (comma-separated)', 'textarea', required=True,
                    placeholder='e.g., Python, Machine Learning, Data Analysis'),
    FieldDescriptor('order', 'Display Order', 'number', required=True, placeholder='0'),
])

# Tab order of the admin panel
SCREENS = {screen.name: screen for screen in (ACHIEVEMENTS, EXPERIENCES, MEDIA, SKILLS)}


def get_screen(name):
    return SCREENS.get(name)
