"""Response bodies for the rendering endpoints."""

from pydantic import BaseModel

from models.field import ResolvedLabel


class LabelResponse(BaseModel):
    """Resolved label plus its rendered markup (empty when not visible)."""

    label: ResolvedLabel
    html: str


class FieldResponse(BaseModel):
    """Rendered label and input markup for one field."""

    label_html: str
    input_html: str
    html: str
