"""Business facts supplied by the places/search integration"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class BusinessFacts(BaseModel):
    """Read-only input to generation. Everything except ``name`` may be missing."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    category: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    review_count: int = Field(default=0, ge=0, alias="reviewCount")
    opening_hours: List[str] = Field(default_factory=list, alias="openingHours")
    place_id: Optional[str] = Field(default=None, alias="placeId")
    industry_override: Optional[str] = Field(default=None, alias="industryOverride")

    @field_validator("review_count", mode="before")
    @classmethod
    def _null_review_count(cls, value):
        return 0 if value is None else value

    @field_validator("opening_hours", mode="before")
    @classmethod
    def _null_hours(cls, value):
        if value is None:
            return []
        return [str(line) for line in value if line]

    @field_validator("rating", mode="before")
    @classmethod
    def _parse_rating(cls, value):
        if value in (None, ""):
            return None
        return float(value)

    @property
    def city(self) -> Optional[str]:
        """Best-effort city from a German-style address ("Straße 1, 80331 München")"""
        if not self.address:
            return None
        tail = self.address.split(",")[-1].strip()
        parts = tail.split(" ", 1)
        if len(parts) == 2 and parts[0].isdigit():
            return parts[1].strip() or None
        return tail or None
