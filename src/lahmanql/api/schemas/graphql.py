from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class GraphQLRequest(BaseModel):
    query: str = Field(..., min_length=1)
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(default=None, alias="operationName")

    model_config = ConfigDict(populate_by_name=True)
