"""Public re-exports of all model types."""

from models.field import FieldDescriptor, InputType, LabelOptions, ResolvedLabel
from models.request import FieldRequest
from models.response import FieldResponse, LabelResponse

__all__ = [
    # Field types
    "FieldDescriptor",
    "InputType",
    "LabelOptions",
    "ResolvedLabel",
    # Request/Response
    "FieldRequest",
    "FieldResponse",
    "LabelResponse",
]
