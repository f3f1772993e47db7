"""Render resolved labels and their paired inputs as HTML fragments.

Tags are built with BeautifulSoup so attribute values and text are escaped
by the serializer. Label text and the required marker are treated as
inline markup and parsed into the label.
"""

from __future__ import annotations

from typing import Any, Optional

from bs4 import BeautifulSoup, Tag

from labels.naming import default_id, input_name
from models.field import FieldDescriptor, LabelOptions, ResolvedLabel

# Semantic input type -> HTML ``type`` attribute for <input>
_HTML_INPUT_TYPES: dict[str, str] = {
    "string": "text",
    "numeric": "number",
    "datetime": "datetime-local",
    "date": "date",
    "time": "time",
    "password": "password",
    "email": "email",
    "hidden": "hidden",
    "boolean": "checkbox",
}


def _fragment(markup: str) -> list:
    """Parse *markup* into detached nodes ready to append elsewhere."""
    frag = BeautifulSoup(markup, "html.parser")
    return [node.extract() for node in list(frag.contents)]


def _class_list(*groups: Any) -> str:
    """Join class groups (strings or iterables) without duplicates."""
    out: list[str] = []
    for group in groups:
        if not group:
            continue
        tokens = group.split() if isinstance(group, str) else list(group)
        for token in tokens:
            if token and token not in out:
                out.append(token)
    return " ".join(out)


def _new_tag(name: str, attrs: dict[str, Any]) -> Tag:
    """New detached tag; ``True`` values become bare boolean attributes."""
    soup = BeautifulSoup("", "html.parser")
    clean = {
        k: "" if v is True else str(v)
        for k, v in attrs.items()
        if v is not None and v is not False
    }
    return soup.new_tag(name, attrs=clean)


def _option_pairs(collection: Any) -> list[tuple[str, str]]:
    """``(text, value)`` pairs from scalars, pairs or a mapping of text -> value."""
    if not collection:
        return []
    items = collection.items() if isinstance(collection, dict) else collection
    pairs: list[tuple[str, str]] = []
    for item in items:
        if isinstance(item, (tuple, list)) and len(item) == 2:
            pairs.append((str(item[0]), str(item[1])))
        else:
            pairs.append((str(item), str(item)))
    return pairs


def build_label_tag(label: ResolvedLabel) -> Optional[Tag]:
    """Build the ``<label>`` tag, or None when the label is not visible.

    Content is ``<marker> <text>`` for required fields, ``<text>`` otherwise.
    """
    if not label.visible:
        return None
    extra = dict(label.html)
    classes = sorted(label.css_classes, key=lambda c: (c == "required", c))
    attrs = {
        **{k: v for k, v in extra.items() if k not in ("class", "for")},
        "class": _class_list(classes, extra.get("class")),
        "for": label.for_id,
    }
    tag = _new_tag("label", attrs)
    if label.required_marker:
        for node in _fragment(label.required_marker):
            tag.append(node)
        tag.append(" ")
    for node in _fragment(label.text):
        tag.append(node)
    return tag


def render_label(label: ResolvedLabel) -> str:
    """Label markup, or an empty string when not visible."""
    tag = build_label_tag(label)
    return "" if tag is None else str(tag)


def build_input_tag(
    descriptor: FieldDescriptor,
    options: Optional[LabelOptions] = None,
    value: Any = None,
) -> Tag:
    """Build the input element paired with the label.

    The id comes from ``options.html["id"]`` or :func:`default_id`, the same
    derivation the resolver uses for the label's ``for``.
    """
    options = options or LabelOptions()
    html_opts = dict(options.html or {})
    input_type = descriptor.input_type
    required = bool(options.required) and input_type != "hidden"

    attrs: dict[str, Any] = {
        "id": html_opts.pop("id", None)
        or default_id(descriptor.object_type_name, descriptor.attribute_name),
        "name": input_name(descriptor.object_type_name, descriptor.attribute_name),
    }
    extra_class = html_opts.pop("class", None)
    if input_type != "hidden":
        attrs["class"] = _class_list(
            [input_type], ["required"] if required else [], extra_class
        )
    elif extra_class:
        attrs["class"] = _class_list(extra_class)
    if required:
        attrs["required"] = "required"

    if input_type == "text":
        tag = _new_tag("textarea", {**html_opts, **attrs})
        if value is not None:
            tag.string = str(value)
        return tag

    if input_type == "select":
        tag = _new_tag("select", {**html_opts, **attrs})
        if not required:
            tag.append(_new_tag("option", {"value": ""}))
        for text, option_value in _option_pairs(options.collection):
            option = _new_tag(
                "option",
                {
                    "value": option_value,
                    "selected": value is not None and str(value) == option_value,
                },
            )
            option.string = text
            tag.append(option)
        return tag

    attrs["type"] = _HTML_INPUT_TYPES.get(input_type, "text")
    if input_type == "boolean":
        attrs["value"] = "1"
        if value:
            attrs["checked"] = "checked"
    elif value is not None:
        attrs["value"] = value
    return _new_tag("input", {**html_opts, **attrs})


def render_input(
    descriptor: FieldDescriptor,
    options: Optional[LabelOptions] = None,
    value: Any = None,
) -> str:
    return str(build_input_tag(descriptor, options, value))
