#  Copyright 2025 EPAM Systems
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      https://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""Search engine response and paging models consumed and produced by the result mappers."""

import math
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field, PositiveInt, field_validator

T = TypeVar("T")


class Hit(BaseModel):
    """Typed representation of a raw OpenSearch search hit."""

    index: Optional[str] = Field(default=None, validation_alias="_index")
    id: str = Field(validation_alias="_id")
    score: Optional[float] = Field(default=None, validation_alias="_score")
    source: Optional[dict[str, Any]] = Field(default=None, validation_alias="_source")
    fields: dict[str, Any] = Field(default_factory=dict)
    sort: Optional[list[Any]] = None
    highlight: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, hit: dict[str, Any]) -> "Hit":
        """
        Build a typed Hit object from OpenSearch raw hit using pydantic validation.

        :param hit: Raw hit dictionary returned by OpenSearch
        :return: Hit instance
        """
        return cls.model_validate(hit)


class HitsEnvelope(BaseModel):
    total: int = 0
    max_score: Optional[float] = None
    hits: list[Hit] = Field(default_factory=list)

    @field_validator("total", mode="before")
    @classmethod
    def _unwrap_total(cls, value: Any) -> Any:
        # Newer engines report {"value": n, "relation": "eq"|"gte"}
        if isinstance(value, dict):
            return value.get("value", 0)
        return value


class SearchResponse(BaseModel):
    """Body of an OpenSearch ``_search`` response."""

    took: int = 0
    timed_out: bool = False
    hits: HitsEnvelope = Field(default_factory=HitsEnvelope)
    aggregations: Optional[dict[str, Any]] = None

    @classmethod
    def from_dict(cls, response: dict[str, Any]) -> "SearchResponse":
        return cls.model_validate(response)


class PageRequest(BaseModel):
    """Zero-based page number and page size of a paged search."""

    page: int = Field(default=0, ge=0)
    size: PositiveInt = 10

    @property
    def offset(self) -> int:
        return self.page * self.size


class ResultPage(BaseModel, Generic[T]):
    """One page of decoded results with the total match count and pass-through aggregations."""

    content: list[T] = Field(default_factory=list)
    page_request: Optional[PageRequest] = None
    total: int = 0
    aggregations: Optional[dict[str, Any]] = None

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def total_pages(self) -> int:
        if self.page_request is None:
            return 1
        return math.ceil(self.total / self.page_request.size)

    @property
    def has_next(self) -> bool:
        if self.page_request is None:
            return False
        return self.page_request.page + 1 < self.total_pages
