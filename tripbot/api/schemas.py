from typing import Any

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """Variables for a single render call. Any JSON values are accepted."""

    variables: dict[str, Any] = Field(
        default_factory=dict,
        description="Variable bag passed to the template",
    )


class RenderResponse(BaseModel):
    category: str
    text: str
    trace_id: str


class CategoryList(BaseModel):
    categories: list[str]
