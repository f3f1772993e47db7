"""Field, option and resolved-label types as Pydantic v2 models."""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

InputType = Literal[
    "string",
    "text",
    "datetime",
    "date",
    "time",
    "boolean",
    "numeric",
    "password",
    "email",
    "select",
    "hidden",
]


class FieldDescriptor(BaseModel):
    """The field being rendered: which object, which attribute, which input."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    object_type_name: str
    attribute_name: str
    input_type: InputType = "string"


class LabelOptions(BaseModel):
    """Caller-supplied overrides for a single field.

    ``label`` is ``False`` to suppress the label, a string to use verbatim,
    or ``None`` to let the resolver pick the text. Any other value is kept
    as ``None`` so the normal lookup chain applies. ``collection`` holds
    the choices of a ``select`` input.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: Union[Literal[False], str, None] = None
    required: Optional[bool] = None
    html: Optional[dict[str, Any]] = None
    label_html: Optional[dict[str, Any]] = None
    collection: Optional[Any] = None

    @field_validator("label", mode="before")
    @classmethod
    def coerce_label(cls, v):
        if v is False or isinstance(v, str):
            return v
        return None


class ResolvedLabel(BaseModel):
    """Everything needed to render a ``<label>`` for one field."""

    model_config = ConfigDict(frozen=True)

    visible: bool
    text: str = ""
    css_classes: frozenset[str] = Field(default_factory=frozenset)
    for_id: str = ""
    required_marker: Optional[str] = None
    html: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def hidden(cls) -> ResolvedLabel:
        """A label that is not rendered at all."""
        return cls(visible=False)
