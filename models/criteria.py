"""MatchCriteria Pydantic model describing one node search."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Legacy "no limit" count accepted by the search helpers.
UNBOUNDED = -1


class MatchCriteria(BaseModel):
    """Tag / attribute filter plus an optional result limit.

    Empty strings mean "do not filter on this field".  ``limit`` is the
    maximum number of distinct nodes to collect; ``None`` (or ``-1``)
    collects every match.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag: str = ""
    attr: str = ""
    attr_value: str = ""
    limit: Optional[int] = None

    @field_validator("tag", "attr", "attr_value", mode="before")
    @classmethod
    def coerce_missing(cls, v):
        if v is None:
            return ""
        return v

    @field_validator("limit", mode="before")
    @classmethod
    def coerce_unbounded(cls, v):
        if v == UNBOUNDED:
            return None
        return v

    @field_validator("limit")
    @classmethod
    def check_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 1:
            raise ValueError("limit must be a positive integer, -1 or None")
        return v

    @property
    def has_attribute_filter(self) -> bool:
        return bool(self.attr or self.attr_value)

    @property
    def is_bounded(self) -> bool:
        return self.limit is not None

    def is_satisfied(self, count: int) -> bool:
        """Return True once *count* results reach the limit."""
        return self.limit is not None and count >= self.limit

    def accepts_pair(self, key: str, value: str) -> bool:
        """Check one ``(key, value)`` attribute pair against the filter."""
        if self.attr and key != self.attr:
            return False
        if self.attr_value and value != self.attr_value:
            return False
        return True
