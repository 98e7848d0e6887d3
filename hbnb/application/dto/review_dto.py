"""
Review DTO
==========

Pydantic models for review requests and responses, plus RatedWrite, the
result of a review mutation that also refreshed the place rating.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictInt

from hbnb.domain.exceptions import ConcurrencyError
from hbnb.domain.models.review import Review
from hbnb.utils.datetime_utils import to_iso


class ReviewCreateRequest(BaseModel):
    """DTO for creating a review."""
    model_config = ConfigDict(extra="forbid")

    rating: StrictInt
    comment: str
    user_id: str
    place_id: str


class ReviewUpdateRequest(BaseModel):
    """DTO for a partial review update. Author and place never change."""
    model_config = ConfigDict(extra="forbid")

    rating: Optional[StrictInt] = None
    comment: Optional[str] = None


class ReviewResponse(BaseModel):
    """DTO for review data."""
    id: str
    rating: int
    comment: str
    user_id: str
    place_id: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.id,
            rating=review.rating,
            comment=review.comment,
            user_id=review.user_id,
            place_id=review.place_id,
            created_at=to_iso(review.created_at),
            updated_at=to_iso(review.updated_at),
        )


@dataclass
class RatedWrite:
    """
    Outcome of a review create/update/delete.

    record is the review as written (or as it was before deletion).
    When the place rating could not be refreshed after the review write
    succeeded, stale is True, error holds the ConcurrencyError and
    average_rating is the last value stored on the place.
    """
    record: Dict[str, Any]
    average_rating: float
    stale: bool = False
    error: Optional[ConcurrencyError] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "record": self.record,
            "average_rating": self.average_rating,
            "stale": self.stale,
            "error": self.error.to_dict() if self.error else None,
        }
