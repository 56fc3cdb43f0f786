import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORY_METHODS = {
    "users": ["get_by_login_id", "exists_by_login_id", "get_by_id", "get_by_ids", "create"],
    "teams": ["get_by_id", "get_by_ids", "create", "delete"],
    "memberships": [
        "get",
        "exists",
        "get_by_user_id",
        "get_by_team_id",
        "count_by_team_id",
        "create",
        "update",
        "delete",
        "delete_by_team_id",
    ],
    "projects": ["get_by_id", "get_by_team_id", "create", "delete", "delete_by_team_id"],
    "diagrams": [
        "get_by_id",
        "get_by_project_id",
        "create",
        "update",
        "delete",
        "delete_by_project_ids",
    ],
    "domains": ["get_by_id", "get_by_team_id", "create", "delete", "delete_by_team_id"],
    "terms": [
        "get_by_id",
        "get_by_team_id",
        "create",
        "detach_domain",
        "delete",
        "delete_by_team_id",
    ],
}


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for repo_name, methods in REPOSITORY_METHODS.items():
        repo = MagicMock()
        for method in methods:
            setattr(repo, method, AsyncMock())
        setattr(uow, repo_name, repo)

    # create/update hand back the entity they were given
    for repo_name in ("users", "teams", "memberships", "projects", "diagrams", "domains", "terms"):
        getattr(uow, repo_name).create.side_effect = lambda entity: entity
    uow.memberships.update.side_effect = lambda entity: entity
    uow.diagrams.update.side_effect = lambda entity: entity

    return uow
