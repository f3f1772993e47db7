"""Request bodies for the rendering endpoints (extra=forbid)."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.field import InputType


class FieldRequest(BaseModel):
    """Incoming request body for ``POST /label`` and ``POST /field``.

    Either ``input_type`` or ``column_type`` decides the input; ``as`` wins
    over both, as it does for the form builder. Extra fields are rejected
    with a 422 response.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    object_name: str
    attribute: str
    input_type: Optional[InputType] = None
    column_type: Optional[str] = None
    as_: Optional[InputType] = Field(default=None, alias="as")
    label: Union[bool, str, None] = None
    required: Optional[bool] = None
    html: Optional[dict[str, Any]] = None
    label_html: Optional[dict[str, Any]] = None
    collection: Optional[Union[list[Any], dict[str, Any]]] = None
    human_names: dict[str, str] = {}
    locale: Optional[str] = None
