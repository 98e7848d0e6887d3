"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .security_provider import SecurityProvider
from .facade_provider import FacadeProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "SecurityProvider",
    "FacadeProvider",
]
