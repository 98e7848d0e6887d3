"""
MongoDB Review Repository
=========================

Concrete implementation of ReviewRepository using MongoDB.
"""
from typing import List, Optional

from hbnb.domain.constants.review_fields import ReviewFields
from hbnb.domain.models.review import Review
from hbnb.domain.repositories.review_repository import ReviewRepository
from hbnb.infrastructure.db.mongo_connection import MongoConnection
from hbnb.infrastructure.db.mongo_repository import MongoRepository, translate_errors
from hbnb.utils.datetime_utils import ensure_aware


class MongoReviewRepository(MongoRepository[Review], ReviewRepository):
    """
    MongoDB implementation of ReviewRepository.

    A unique compound index on (user_id, place_id) backs the one review per
    user and place rule at the store level as well.
    """

    ENTITY_NAME = "review"
    UPDATABLE_FIELDS = frozenset({ReviewFields.RATING, ReviewFields.COMMENT, ReviewFields.UPDATED_AT})

    def __init__(self, connection: MongoConnection, collection_name: str = "reviews"):
        super().__init__(connection, collection_name)
        with translate_errors("create_index"):
            self._collection.create_index(
                [(ReviewFields.USER_ID, 1), (ReviewFields.PLACE_ID, 1)], unique=True
            )
            self._collection.create_index(ReviewFields.PLACE_ID)

    def _to_entity(self, doc: dict) -> Review:
        """Convert MongoDB document to Review entity."""
        return Review(
            id=doc[ReviewFields.ID],
            rating=doc[ReviewFields.RATING],
            comment=doc[ReviewFields.COMMENT],
            user_id=doc[ReviewFields.USER_ID],
            place_id=doc[ReviewFields.PLACE_ID],
            created_at=ensure_aware(doc[ReviewFields.CREATED_AT]),
            updated_at=ensure_aware(doc[ReviewFields.UPDATED_AT]),
            version=doc.get(ReviewFields.VERSION, 1),
        )

    def _to_document(self, review: Review) -> dict:
        """Convert Review entity to MongoDB document."""
        return {
            ReviewFields.ID: review.id,
            ReviewFields.RATING: review.rating,
            ReviewFields.COMMENT: review.comment,
            ReviewFields.USER_ID: review.user_id,
            ReviewFields.PLACE_ID: review.place_id,
            ReviewFields.CREATED_AT: review.created_at,
            ReviewFields.UPDATED_AT: review.updated_at,
            ReviewFields.VERSION: review.version,
        }

    def find_by_place(self, place_id: str) -> List[Review]:
        return self._find_many({ReviewFields.PLACE_ID: place_id})

    def find_by_user(self, user_id: str) -> List[Review]:
        return self._find_many({ReviewFields.USER_ID: user_id})

    def find_by_user_and_place(self, user_id: str, place_id: str) -> Optional[Review]:
        return self._find_one({ReviewFields.USER_ID: user_id, ReviewFields.PLACE_ID: place_id})
