"""Form builder: renders label + input pairs for attributes of a model object.

The model object is only probed, never required to implement anything:

- ``column_for_attribute(attr)`` -> column type (``"integer"``, ``"text"``...)
- ``attribute_required(attr)`` -> bool, the required predicate
- ``human_attribute_name(attr)`` -> str, on the object or its class
- ``getattr(obj, attr)`` -> current value
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from bs4 import BeautifulSoup

from config import Settings, load_settings
from labels.human_names import HumanNameProvider, human_name_provider_for
from labels.markup import build_input_tag, build_label_tag
from labels.naming import default_input_type, underscore
from labels.resolver import resolve
from models.field import FieldDescriptor, LabelOptions
from translations.store import Translator

logger = logging.getLogger("labels")

FieldSpec = Union[str, tuple[str, Mapping[str, Any]]]


def _probe(obj: object, name: str, *args: Any) -> Any:
    """Call ``obj.<name>(*args)`` when present, else return None."""
    func = getattr(obj, name, None)
    if not callable(func):
        return None
    return func(*args)


class FormBuilder:
    """Builds field markup for one model object.

    Args:
        obj: The model object (may be None for object-less forms).
        object_name: Param/id prefix; defaults to the underscored class name.
        translator: Translation lookup passed through to the resolver.
        settings: Settings; ``required_by_default`` is the last-resort
            required predicate.
        locale: Locale for every lookup made by this builder.
    """

    def __init__(
        self,
        obj: object = None,
        *,
        object_name: Optional[str] = None,
        translator: Optional[Translator] = None,
        settings: Optional[Settings] = None,
        locale: Optional[str] = None,
        human_names: Optional[HumanNameProvider] = None,
    ) -> None:
        self.object = obj
        self.settings = settings or load_settings()
        self.object_name = object_name or (
            underscore(type(obj).__name__) if obj is not None else "form"
        )
        self.translator = translator
        self.locale = locale or self.settings.default_locale
        self.human_names = human_names or human_name_provider_for(obj)

    # ------------------------------------------------------------------
    # Capability probes
    # ------------------------------------------------------------------

    def is_required(self, attribute: str, explicit: Optional[bool] = None) -> bool:
        """Explicit option, then the model's predicate, then the default."""
        if explicit is not None:
            return explicit
        probed = _probe(self.object, "attribute_required", attribute)
        if probed is not None:
            return bool(probed)
        return self.settings.required_by_default

    def input_type_for(self, attribute: str, as_: Optional[str] = None) -> str:
        if as_:
            return as_
        column = _probe(self.object, "column_for_attribute", attribute)
        return default_input_type(attribute, column)

    def descriptor(self, attribute: str, as_: Optional[str] = None) -> FieldDescriptor:
        return FieldDescriptor(
            object_type_name=self.object_name,
            attribute_name=attribute,
            input_type=self.input_type_for(attribute, as_),
        )

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def label(
        self,
        attribute: str,
        *,
        label: Any = None,
        required: Optional[bool] = None,
        html: Optional[dict[str, Any]] = None,
        label_html: Optional[dict[str, Any]] = None,
        as_: Optional[str] = None,
    ) -> str:
        """Render only the ``<label>`` for *attribute* ("" when hidden)."""
        descriptor = self.descriptor(attribute, as_)
        options = self._options(attribute, label, required, html, label_html)
        tag = build_label_tag(
            resolve(
                descriptor,
                options,
                self.translator,
                human_names=self.human_names,
                locale=self.locale,
            )
        )
        return "" if tag is None else str(tag)

    def input(
        self,
        attribute: str,
        *,
        label: Any = None,
        required: Optional[bool] = None,
        html: Optional[dict[str, Any]] = None,
        label_html: Optional[dict[str, Any]] = None,
        as_: Optional[str] = None,
        collection: Any = None,
    ) -> str:
        """Render the label followed by the input for *attribute*.

        Orchestrates:
        1. Input type from ``as_`` or the probed column type
        2. Required predicate (explicit, model, default)
        3. Label resolution through the shared resolver
        4. Input rendering with the same id derivation
        """
        descriptor = self.descriptor(attribute, as_)
        options = self._options(
            attribute, label, required, html, label_html, collection
        )
        resolved = resolve(
            descriptor,
            options,
            self.translator,
            human_names=self.human_names,
            locale=self.locale,
        )
        value = getattr(self.object, attribute, None) if self.object is not None else None
        if callable(value):
            value = None

        label_tag = build_label_tag(resolved)
        input_tag = build_input_tag(descriptor, options, value)

        logger.debug(
            "field rendered",
            extra={
                "object_name": self.object_name,
                "attribute": attribute,
                "locale": self.locale,
            },
        )
        parts = [str(input_tag)] if label_tag is None else [str(label_tag), str(input_tag)]
        return "".join(parts)

    def _options(
        self,
        attribute: str,
        label: Any,
        required: Optional[bool],
        html: Optional[dict[str, Any]],
        label_html: Optional[dict[str, Any]],
        collection: Any = None,
    ) -> LabelOptions:
        return LabelOptions(
            label=label,
            required=self.is_required(attribute, required),
            html=html,
            label_html=label_html,
            collection=collection,
        )


def form_for(
    obj: object,
    fields: Iterable[FieldSpec],
    *,
    object_name: Optional[str] = None,
    translator: Optional[Translator] = None,
    settings: Optional[Settings] = None,
    locale: Optional[str] = None,
    action: str = "",
) -> str:
    """Render a ``<form>`` holding an input for each field.

    *fields* items are attribute names or ``(attribute, options)`` pairs,
    where options are the keyword arguments of :meth:`FormBuilder.input`.
    """
    builder = FormBuilder(
        obj,
        object_name=object_name,
        translator=translator,
        settings=settings,
        locale=locale,
    )
    soup = BeautifulSoup("", "html.parser")
    form = soup.new_tag(
        "form",
        attrs={
            "action": action,
            "method": "post",
            "class": "simple_form",
            "id": f"new_{builder.object_name}",
        },
    )
    for spec in fields:
        if isinstance(spec, str):
            attribute, opts = spec, {}
        else:
            attribute, opts = spec[0], dict(spec[1])
        markup = builder.input(attribute, **opts)
        for node in list(BeautifulSoup(markup, "html.parser").contents):
            form.append(node.extract())
    return str(form)
