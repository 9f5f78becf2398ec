"""State managers for handling application-wide mutable state.

This module provides thread-safe state management using asyncio.Lock
for async operations. All state managers inherit from StateManager ABC.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from forge_ui.exceptions import ConfigurationException
from forge_ui.logging_config import get_logger, log_with_context
from forge_ui.models.organization import OrganizationSnapshot
from forge_ui.models.repository import RepositorySnapshot

logger = get_logger(__name__)


class StateManager(ABC):
    """Base class for all state managers.

    State managers provide thread-safe access to mutable application state.
    All subclasses must implement lifecycle methods.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the state manager (called during app startup)."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Cleanup resources (called during app shutdown)."""
        pass


class InMemoryRepositoryStore(StateManager):
    """Repository and organization snapshots kept in process memory.

    Stands in for the data layer: it satisfies ``RepositorySource`` and hands
    out the frozen snapshots it was seeded with.
    """

    def __init__(
        self,
        repositories: Iterable[RepositorySnapshot] = (),
        organizations: Iterable[OrganizationSnapshot] = (),
    ):
        self._repositories: dict[tuple[str, str], RepositorySnapshot] = {}
        self._organizations: dict[str, OrganizationSnapshot] = {}
        self._seed_repositories = list(repositories)
        self._seed_organizations = list(organizations)
        self._lock = asyncio.Lock()

    @staticmethod
    def _repo_key(owner: str, name: str) -> tuple[str, str]:
        # Names are case insensitive
        return owner.lower(), name.lower()

    async def initialize(self) -> None:
        """Load the seed snapshots."""
        for repo in self._seed_repositories:
            await self.put_repository(repo)
        for org in self._seed_organizations:
            await self.put_organization(org)
        log_with_context(
            logger,
            "info",
            "Repository store initialized",
            repositories=len(self._repositories),
            organizations=len(self._organizations),
            event_type="repository_store_ready",
        )

    async def cleanup(self) -> None:
        """Drop every snapshot."""
        async with self._lock:
            self._repositories.clear()
            self._organizations.clear()

    async def put_repository(self, repo: RepositorySnapshot) -> None:
        async with self._lock:
            self._repositories[self._repo_key(repo.owner_name, repo.name)] = repo

    async def put_organization(self, org: OrganizationSnapshot) -> None:
        async with self._lock:
            self._organizations[org.name.lower()] = org

    async def get_repository(self, owner: str, name: str) -> RepositorySnapshot | None:
        async with self._lock:
            return self._repositories.get(self._repo_key(owner, name))

    async def get_organization(self, name: str) -> OrganizationSnapshot | None:
        async with self._lock:
            return self._organizations.get(name.lower())

    async def count(self) -> dict[str, int]:
        """Number of stored repositories and organizations."""
        async with self._lock:
            return {"repositories": len(self._repositories), "organizations": len(self._organizations)}


class SeedData(BaseModel):
    """Contents of the seed file loaded into the in-memory store."""

    repositories: list[RepositorySnapshot] = Field(default_factory=list)
    organizations: list[OrganizationSnapshot] = Field(default_factory=list)


def load_seed_file(path: Path | None) -> SeedData:
    """Read snapshots from ``path``; a missing path yields an empty seed.

    Raises:
        ConfigurationException: If the file cannot be read or validated
    """
    if path is None:
        return SeedData()
    try:
        return SeedData.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise ConfigurationException(
            f"Cannot load seed file {path}",
            details={"path": str(path), "error": str(e)},
        ) from e
