"""
Update Amenity Use Case
=======================
"""
import logging
from typing import Any, Dict, Mapping

from hbnb.application.concurrency import AggregateGuard, amenity_key, unique_key
from hbnb.application.dto import AmenityUpdateRequest, parse_request
from hbnb.domain.constants.amenity_fields import AmenityFields
from hbnb.domain.models.amenity import Amenity
from hbnb.domain.repositories import AmenityRepository
from hbnb.domain.rules import assert_amenity_exists, assert_unique_amenity_name
from hbnb.domain.validation import MAX_NAME_LENGTH, validate_optional_text, validate_required_text

logger = logging.getLogger(__name__)


class UpdateAmenityUseCase:
    """Use case for renaming or re-describing an amenity."""

    def __init__(self, amenity_repository: AmenityRepository, guard: AggregateGuard):
        self._amenities = amenity_repository
        self._guard = guard

    def execute(self, amenity_id: str, data: Mapping[str, Any]) -> Amenity:
        """
        Raises:
            ValidationError: If a sent field is malformed
            NotFoundError: If the amenity does not exist
            ConflictError: If another amenity already has the new name
        """
        sent = parse_request(AmenityUpdateRequest, data).model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {}
        if AmenityFields.NAME in sent:
            changes[AmenityFields.NAME] = validate_required_text(
                AmenityFields.NAME, sent[AmenityFields.NAME], MAX_NAME_LENGTH
            )
        if AmenityFields.DESCRIPTION in sent:
            changes[AmenityFields.DESCRIPTION] = validate_optional_text(
                AmenityFields.DESCRIPTION, sent[AmenityFields.DESCRIPTION]
            )

        keys = [amenity_key(amenity_id)]
        if AmenityFields.NAME in changes:
            keys.append(unique_key(AmenityFields.NAME, changes[AmenityFields.NAME]))

        with self._guard.exclusive(*keys):
            current = assert_amenity_exists(self._amenities, amenity_id)
            if not changes:
                return current
            if AmenityFields.NAME in changes:
                assert_unique_amenity_name(
                    self._amenities, changes[AmenityFields.NAME], exclude_id=amenity_id
                )
            updated = self._amenities.update(amenity_id, changes)

        logger.info(f"Amenity {amenity_id} updated ({', '.join(sorted(changes))})")
        return updated
