"""Shared naming helpers for labels and inputs.

The label's ``for`` and the input's ``id`` must always agree, so both
renderers derive them through :func:`default_id` and nothing else.
"""

from __future__ import annotations

import re

LABEL_SCOPE = "simple_form.labels"
REQUIRED_SCOPE = "simple_form.required"

# Column type -> semantic input type
_COLUMN_INPUT_TYPES: dict[str, str] = {
    "string": "string",
    "text": "text",
    "integer": "numeric",
    "float": "numeric",
    "decimal": "numeric",
    "datetime": "datetime",
    "timestamp": "datetime",
    "date": "date",
    "time": "time",
    "boolean": "boolean",
}


def _sanitize(value: str) -> str:
    """Turn ``user[address][city]`` style names into ``user_address_city``."""
    return re.sub(r"\]\[|[^-a-zA-Z0-9:.]", "_", value).rstrip("_")


def default_id(object_name: str, attribute: str) -> str:
    """Canonical ``<object>_<attribute>`` id shared by label and input."""
    return _sanitize(f"{object_name}_{attribute}")


def input_name(object_name: str, attribute: str) -> str:
    """Form parameter name, e.g. ``user[name]``."""
    return f"{object_name}[{attribute}]"


def underscore(class_name: str) -> str:
    """``SuperUser`` -> ``super_user``."""
    s = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", class_name)
    s = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", s)
    return s.replace("-", "_").lower()


def humanize(attribute: str) -> str:
    """Human-readable fallback for an attribute name.

    ``credit_limit`` -> ``Credit limit``; a trailing ``_id`` is dropped.
    """
    s = re.sub(r"_id$", "", attribute or "")
    s = s.replace("_", " ").strip()
    if not s:
        return ""
    return s[0].upper() + s[1:]


def label_keys(object_type: str, attribute: str) -> list[str]:
    """i18n keys for a label, most specific first."""
    return [
        f"{LABEL_SCOPE}.{object_type}.{attribute}",
        f"{LABEL_SCOPE}.{attribute}",
    ]


def required_key(name: str) -> str:
    """i18n key under the required scope (``mark``, ``text`` or ``string``)."""
    return f"{REQUIRED_SCOPE}.{name}"


def default_input_type(attribute: str, column_type: str | None) -> str:
    """Map a column type to the semantic input type.

    Attributes whose name mentions ``password`` get a password input
    regardless of column type; unknown columns render as ``string``.
    """
    if "password" in attribute:
        return "password"
    if column_type is None:
        return "string"
    return _COLUMN_INPUT_TYPES.get(str(column_type).lower(), "string")
