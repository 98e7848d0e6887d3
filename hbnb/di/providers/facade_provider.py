from typing import TYPE_CHECKING

from ...application.concurrency import AggregateGuard
from ...application.services.hbnb_facade import HBnBFacade
from ...core.config import Settings
from ...domain.repositories import (
    AmenityRepository,
    PlaceRepository,
    ReviewRepository,
    UserRepository,
)
from ...domain.services.credential_hasher import CredentialHasher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FacadeProvider:
    """Facade provider - registers the concurrency guard and the facade"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the facade.
        Facade is created with repositories and collaborators from container.
        """
        settings: Settings = container.get(Settings)
        guard = AggregateGuard(settings.guard_timeout_seconds)
        container.register_singleton(AggregateGuard, guard)

        container.register_singleton(
            HBnBFacade,
            HBnBFacade(
                user_repository=container.get(UserRepository),
                place_repository=container.get(PlaceRepository),
                review_repository=container.get(ReviewRepository),
                amenity_repository=container.get(AmenityRepository),
                hasher=container.get(CredentialHasher),
                guard=guard,
                settings=settings,
            ),
        )
