"""
Project Use Case DTOs
"""

from datetime import datetime

from pydantic import BaseModel

from smarterd.domain.entities import Project


class ProjectResponse(BaseModel):
    """Project as returned to team members"""

    id: str
    name: str
    team_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=str(project.id),
            name=project.name,
            team_id=str(project.team_id),
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class DeleteProjectResponse(BaseModel):
    """Response for delete project use case"""

    status: str
