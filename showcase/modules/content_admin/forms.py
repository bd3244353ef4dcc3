"""
Generic Item Form
=================

Declarative create/edit form shared by every content screen.
A list of FieldDescriptor drives rendering, validation and the multipart
payload handed to the screen's save callback.
"""

import base64
import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

FIELD_TYPES = ('text', 'textarea', 'select', 'number', 'url', 'file')

# fields: {name: str}; files: {'image': (filename, bytes, mimetype)}
MultipartPayload = namedtuple('MultipartPayload', ['fields', 'files'])


class FieldDescriptor:
    """One form field: name, label, widget type and validation hints."""

    def __init__(self, name, label, type='text', required=False, options=None, placeholder=None):
        if type not in FIELD_TYPES:
            raise ValueError(f"Unknown field type: {type}")
        self.name = name
        self.label = label
        self.type = type
        self.required = required
        self.options = list(options or [])
        self.placeholder = placeholder

    def __repr__(self):
        return f"FieldDescriptor({self.name!r}, type={self.type!r})"


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(raw):
    """Turn submitted text into an int (or float when fractional). Empty input is 0."""
    if _is_number(raw):
        return raw
    text = str(raw if raw is not None else '').strip()
    if not text:
        return 0
    number = float(text)
    return int(number) if number.is_integer() else number


def preview_data_url(file_storage):
    """Base64 data URL for an uploaded image, leaving the stream readable for submission."""
    if not file_storage or not file_storage.filename:
        return None
    stream = file_storage.stream
    position = stream.tell()
    data = stream.read()
    stream.seek(position)
    mimetype = file_storage.mimetype or 'application/octet-stream'
    return f"data:{mimetype};base64,{base64.b64encode(data).decode('ascii')}"


class ItemForm:
    """
    Editable state for one create/edit form.

    Args:
        fields: list of FieldDescriptor
        item: existing backend record when editing, None when creating
        title: heading shown above the form
        image_resolver: callable mapping a stored image path to a URL
    """

    def __init__(self, fields, item=None, title='', image_resolver=None):
        self.fields = list(fields)
        self.item = item
        self.title = title
        self.image_resolver = image_resolver
        self.values = {}
        self.file = None
        self.image_preview = None
        self.errors = {}
        self.error = None
        self.reselect_image = False
        self._stored_preview = None
        self._load_initial()

    @property
    def has_file_field(self):
        return any(f.type == 'file' for f in self.fields)

    @property
    def input_fields(self):
        return [f for f in self.fields if f.type != 'file']

    @property
    def is_edit(self):
        return self.item is not None

    @property
    def stored_image(self):
        return (self.item or {}).get('image') or ''

    def _load_initial(self):
        item = self.item or {}
        values = {}
        for field in self.input_fields:
            if field.name in item:
                value = item[field.name]
                if field.type == 'number':
                    values[field.name] = value if _is_number(value) else 0
                elif isinstance(value, bool):
                    values[field.name] = value
                else:
                    values[field.name] = str(value or '')
            else:
                values[field.name] = 0 if field.type == 'number' else ''
        self.values = values

        existing = item.get('image') if item else None
        if existing:
            self._stored_preview = self.image_resolver(existing) if self.image_resolver else existing
        self.image_preview = self._stored_preview

    def display_value(self, name):
        """Value rendered into the widget; booleans show as true/false like the select options."""
        value = self.values.get(name, '')
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return '' if value is None else str(value)

    def bind(self, form_data, files=None):
        """Copy submitted values into the form, coercing number fields."""
        self.errors = {}
        self.error = None
        for field in self.input_fields:
            raw = form_data.get(field.name, '')
            if field.type == 'number':
                try:
                    self.values[field.name] = coerce_number(raw)
                except (TypeError, ValueError):
                    self.values[field.name] = raw
                    self.errors[field.name] = f"{field.label} must be a number"
            else:
                self.values[field.name] = raw if raw is not None else ''

        upload = files.get('image') if files else None
        if upload is not None and upload.filename:
            self.file = upload
            self.image_preview = preview_data_url(upload)
        return self

    def validate(self):
        for field in self.fields:
            if field.name in self.errors:
                continue
            if field.type == 'file':
                has_image = self.file is not None or bool((self.item or {}).get('image'))
                if field.required and not has_image:
                    self.errors[field.name] = f"{field.label} is required"
                continue

            if field.type == 'number':
                continue
            text = self.display_value(field.name).strip()
            if field.required and not text:
                self.errors[field.name] = f"{field.label} is required"
            elif field.type == 'select' and text and field.options and text not in field.options:
                self.errors[field.name] = f"{field.label} must be one of: {', '.join(field.options)}"
        return not self.errors

    def build_payload(self):
        """Every tracked field as a string plus the selected file under 'image'."""
        fields = {}
        for name, value in self.values.items():
            if value is None:
                continue
            if isinstance(value, bool):
                fields[name] = 'true' if value else 'false'
            else:
                fields[name] = str(value)

        files = {}
        if self.file is not None:
            stream = self.file.stream
            stream.seek(0)
            files['image'] = (self.file.filename, stream.read(), self.file.mimetype or 'application/octet-stream')
        return MultipartPayload(fields, files)

    def submit(self, save):
        """
        Validate and hand the payload to save(payload).

        Returns True when saved (state is reset). On a validation or save
        failure the form keeps its state and exposes the reason in errors/error.
        """
        if not self.validate():
            self.release_upload()
            return False
        try:
            save(self.build_payload())
        except Exception as e:
            logger.error("Error saving item: %s", e)
            self.error = f"Save failed: {e}"
            self.release_upload()
            return False
        self.reset()
        return True

    def release_upload(self):
        """
        Drop an unsaved upload before the form is shown again.

        Browsers never re-fill a file input, so the preview falls back to the
        stored image and the user is asked to pick the file again.
        """
        if self.file is None:
            return
        self.file = None
        self.image_preview = self._stored_preview
        self.reselect_image = True

    def reset(self):
        self.values = {}
        self.file = None
        self.image_preview = None
        self.errors = {}
        self.error = None
        self.reselect_image = False
