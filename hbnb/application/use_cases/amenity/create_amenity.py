"""
Create Amenity Use Case
=======================
"""
import logging
from typing import Any, Mapping

from hbnb.application.concurrency import AggregateGuard, unique_key
from hbnb.application.dto import AmenityCreateRequest, parse_request
from hbnb.domain.constants.amenity_fields import AmenityFields
from hbnb.domain.models.amenity import Amenity
from hbnb.domain.repositories import AmenityRepository
from hbnb.domain.rules import assert_unique_amenity_name
from hbnb.domain.validation import validate_amenity

logger = logging.getLogger(__name__)


class CreateAmenityUseCase:
    """Use case for creating an amenity with a unique name."""

    def __init__(self, amenity_repository: AmenityRepository, guard: AggregateGuard):
        self._amenities = amenity_repository
        self._guard = guard

    def execute(self, data: Mapping[str, Any]) -> Amenity:
        """
        Raises:
            ValidationError: If the name is missing or too long
            ConflictError: If an amenity with this name exists (any case)
        """
        request = parse_request(AmenityCreateRequest, data)
        amenity = validate_amenity(Amenity(name=request.name, description=request.description))

        with self._guard.exclusive(unique_key(AmenityFields.NAME, amenity.name)):
            assert_unique_amenity_name(self._amenities, amenity.name)
            saved = self._amenities.save(amenity)

        logger.info(f"Amenity {saved.id} '{saved.name}' created")
        return saved
