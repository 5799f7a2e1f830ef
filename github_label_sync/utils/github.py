"""Contains utility functions for GitHub interactions."""


async def split_repository_in_configuration(repo: str | None) -> tuple[str, str]:
    """Splits the repository in the configuration into owner and repository."""
    if repo is None:
        raise ValueError("A repository in the format 'owner/repo' is required.")
    repo = repo.strip().strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts, got '{repo}'.")
    owner, repository = parts
    return owner, repository


def parse_repository_list(repositories: str) -> list[str]:
    """Split a newline-separated list of repositories, dropping blank lines."""
    return [line.strip() for line in repositories.splitlines() if line.strip()]
