"""Response envelope and base model shared by every endpoint."""

from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Serializes with camelCase keys and accepts either spelling on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    status: Literal["success", "error"] = "success"
    message: str | None = None
    data: T | None = None


class PageRead(CamelModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int
    pages: int


class CountRead(BaseModel):
    count: int


def success(data: Any = None, message: str | None = None) -> dict[str, Any]:
    """Build the success envelope returned by the routes."""

    return {"status": "success", "message": message, "data": data}


__all__ = ["ApiResponse", "CamelModel", "CountRead", "PageRead", "success"]
