"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations on top of a single
shared record store.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.debates.interfaces import IDebateService
    from modules.debates.repository import DebateRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from shared.database import RecordStore


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self, store: "RecordStore | None" = None) -> None:
        self._store = store
        self._debate_repository: "DebateRepository | None" = None
        self._debate_service: "IDebateService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._user_service: "IUserService | None" = None

    @property
    def store(self) -> "RecordStore":
        """Get the record store shared by all repositories."""
        if self._store is None:
            from shared.database import get_record_store
            self._store = get_record_store()
        return self._store

    @property
    def debate_repository(self) -> "DebateRepository":
        """Get the debate repository instance."""
        if self._debate_repository is None:
            from modules.debates.repository import DebateRepository
            self._debate_repository = DebateRepository(self.store)
        return self._debate_repository

    @property
    def debates(self) -> "IDebateService":
        """Get the debate service instance."""
        if self._debate_service is None:
            from modules.debates.service import DebateService
            self._debate_service = DebateService(repository=self.debate_repository)
        return self._debate_service

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.store)
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(repository=self.user_repository)
        return self._user_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._store = None
        self._debate_repository = None
        self._debate_service = None
        self._user_repository = None
        self._user_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_debate_service() -> "IDebateService":
    """FastAPI dependency for debate service."""
    return get_container().debates


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users
