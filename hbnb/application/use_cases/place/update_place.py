"""
Update Place Use Case
=====================

Business use case for a partial place update.
"""
import logging
from typing import Any, Dict, Mapping

from hbnb.application.concurrency import AggregateGuard, place_key
from hbnb.application.dto import PlaceUpdateRequest, parse_request
from hbnb.domain.constants.place_fields import PlaceFields
from hbnb.domain.models.place import Place
from hbnb.domain.repositories import PlaceRepository
from hbnb.domain.rules import assert_place_exists
from hbnb.domain.validation import (
    MAX_TITLE_LENGTH,
    validate_latitude,
    validate_longitude,
    validate_optional_text,
    validate_price,
    validate_required_text,
)

logger = logging.getLogger(__name__)

_VALIDATORS = {
    PlaceFields.TITLE: lambda value: validate_required_text(PlaceFields.TITLE, value, MAX_TITLE_LENGTH),
    PlaceFields.DESCRIPTION: lambda value: validate_optional_text(PlaceFields.DESCRIPTION, value),
    PlaceFields.PRICE: validate_price,
    PlaceFields.LATITUDE: validate_latitude,
    PlaceFields.LONGITUDE: validate_longitude,
}


class UpdatePlaceUseCase:
    """Use case for updating the descriptive fields of a place."""

    def __init__(self, place_repository: PlaceRepository, guard: AggregateGuard):
        self._places = place_repository
        self._guard = guard

    def execute(self, place_id: str, data: Mapping[str, Any]) -> Place:
        """
        Execute the update place use case.

        Raises:
            ValidationError: If a sent field is malformed, or data tries to
                set owner_id, amenity_ids or average_rating
            NotFoundError: If the place does not exist
        """
        sent = parse_request(PlaceUpdateRequest, data).model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {name: _VALIDATORS[name](value) for name, value in sent.items()}

        with self._guard.exclusive(place_key(place_id)):
            current = assert_place_exists(self._places, place_id, PlaceFields.ID)
            if not changes:
                return current
            updated = self._places.update(place_id, changes)

        logger.info(f"Place {place_id} updated ({', '.join(sorted(changes))})")
        return updated
