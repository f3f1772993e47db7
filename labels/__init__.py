"""Label resolution, shared naming helpers and markup rendering."""

from labels.human_names import (
    HumanNameProvider,
    MappingHumanNameProvider,
    NullHumanNameProvider,
    human_name_provider_for,
)
from labels.markup import render_input, render_label
from labels.naming import default_id, humanize, label_keys, required_key
from labels.resolver import resolve

__all__ = [
    # Resolution
    "resolve",
    # Capabilities
    "HumanNameProvider",
    "MappingHumanNameProvider",
    "NullHumanNameProvider",
    "human_name_provider_for",
    # Naming
    "default_id",
    "humanize",
    "label_keys",
    "required_key",
    # Markup
    "render_input",
    "render_label",
]
