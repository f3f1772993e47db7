"""Label text and attribute resolution for a single form field.

Text priority order (first match wins):
    1. ``label=False`` -> no label
    2. explicit ``label`` string, used verbatim
    3. ``simple_form.labels.<object>.<attribute>`` translation
    4. ``simple_form.labels.<attribute>`` translation
    5. the object's human attribute name, when it has one
    6. humanized attribute name

Hidden inputs never get a label. Lookups degrade to the next step instead
of raising.
"""

from __future__ import annotations

import html
import logging
from typing import Optional

from labels.human_names import HumanNameProvider, NullHumanNameProvider
from labels.naming import default_id, humanize, label_keys, required_key
from models.field import FieldDescriptor, LabelOptions, ResolvedLabel
from translations.store import Translator

logger = logging.getLogger("labels")

DEFAULT_REQUIRED_MARK = "*"
DEFAULT_REQUIRED_TEXT = "required"


def translate(
    i18n: Optional[Translator], key: str, locale: Optional[str] = None
) -> Optional[str]:
    """Look up *key*, treating a missing or failing translator as absent."""
    if i18n is None:
        return None
    try:
        value = i18n.lookup(key, locale)
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "translation lookup failed for %s: %s: %s",
            key,
            type(exc).__name__,
            exc,
            extra={"locale": locale},
        )
        return None
    if value is None or not isinstance(value, str):
        return None
    return value


def resolve_text(
    descriptor: FieldDescriptor,
    options: LabelOptions,
    i18n: Optional[Translator],
    human_names: HumanNameProvider,
    locale: Optional[str] = None,
) -> tuple[str, str]:
    """Return ``(text, source)`` for a visible label."""
    if isinstance(options.label, str) and options.label:
        return options.label, "explicit"

    for key in label_keys(descriptor.object_type_name, descriptor.attribute_name):
        value = translate(i18n, key, locale)
        if value:
            return value, key

    attribute = descriptor.attribute_name
    try:
        if human_names.has_human_name(attribute):
            name = human_names.human_name(attribute)
            if name:
                return name, "human_name"
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "human name lookup failed for %s: %s",
            attribute,
            exc,
            extra={"attribute": attribute},
        )

    return humanize(attribute), "humanized"


def required_marker(
    i18n: Optional[Translator], locale: Optional[str] = None
) -> str:
    """Markup appended to the label text of a required field.

    A ``simple_form.required.string`` translation is raw markup and replaces
    the default ``<abbr>`` wrapper entirely.
    """
    template = translate(i18n, required_key("string"), locale)
    if template:
        return template
    mark = translate(i18n, required_key("mark"), locale) or DEFAULT_REQUIRED_MARK
    title = translate(i18n, required_key("text"), locale) or DEFAULT_REQUIRED_TEXT
    return (
        f'<abbr title="{html.escape(title, quote=True)}">'
        f"{html.escape(mark, quote=False)}</abbr>"
    )


def resolve(
    descriptor: FieldDescriptor,
    options: Optional[LabelOptions],
    i18n: Optional[Translator],
    *,
    human_names: Optional[HumanNameProvider] = None,
    locale: Optional[str] = None,
) -> ResolvedLabel:
    """Resolve the label for one field.

    ``options.required`` is the externally computed required predicate;
    ``None`` counts as not required.

    Returns:
        A ``ResolvedLabel``; ``visible`` is False for ``label=False`` and
        for hidden inputs, in which case nothing else is filled in.
    """
    options = options or LabelOptions()
    if options.label is False or descriptor.input_type == "hidden":
        return ResolvedLabel.hidden()

    text, source = resolve_text(
        descriptor,
        options,
        i18n,
        human_names or NullHumanNameProvider(),
        locale,
    )

    required = bool(options.required)
    classes = {descriptor.input_type}
    if required:
        classes.add("required")

    html_opts = options.html or {}
    for_id = html_opts.get("id") or default_id(
        descriptor.object_type_name, descriptor.attribute_name
    )

    logger.debug(
        "label resolved",
        extra={
            "object_name": descriptor.object_type_name,
            "attribute": descriptor.attribute_name,
            "locale": locale,
            "label_source": source,
        },
    )

    return ResolvedLabel(
        visible=True,
        text=text,
        css_classes=frozenset(classes),
        for_id=str(for_id),
        required_marker=required_marker(i18n, locale) if required else None,
        html=dict(options.label_html or {}),
    )
