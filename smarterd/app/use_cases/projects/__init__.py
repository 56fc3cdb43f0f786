"""
Project Use Cases
"""

from .create_project_use_case import CreateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import DeleteProjectResponse, ProjectResponse
from .get_project_use_case import GetProjectUseCase
from .get_projects_use_case import GetProjectsUseCase

__all__ = [
    "CreateProjectUseCase",
    "GetProjectsUseCase",
    "GetProjectUseCase",
    "DeleteProjectUseCase",
    "ProjectResponse",
    "DeleteProjectResponse",
]
