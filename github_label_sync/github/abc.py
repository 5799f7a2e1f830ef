"""Base ABC for label repository clients."""

from abc import ABC, abstractmethod

from github_label_sync.schemas.labels import LabelModel


class LabelRepositoryBase(ABC):
    """Base ABC for clients that manage the labels of a remote repository.

    Implementations must be safe to call concurrently from multiple asyncio tasks.
    """

    @abstractmethod
    async def list_labels(self, owner: str, repo: str) -> list[LabelModel]:
        """List every label of a repository, following pagination to the end."""
        pass

    @abstractmethod
    async def create_label(self, owner: str, repo: str, label: LabelModel) -> None:
        """Create a label on a repository."""
        pass

    @abstractmethod
    async def update_label(self, owner: str, repo: str, name: str, label: LabelModel) -> None:
        """Update the label called name so it matches label, renaming it if label.name differs."""
        pass

    @abstractmethod
    async def delete_label(self, owner: str, repo: str, name: str) -> None:
        """Delete a label from a repository."""
        pass
