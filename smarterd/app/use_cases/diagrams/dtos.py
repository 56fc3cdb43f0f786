"""
Diagram Use Case DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from smarterd.domain.entities import Diagram


class DiagramSummary(BaseModel):
    """Diagram listing entry (content omitted)"""

    id: str
    name: str
    project_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_diagram(cls, diagram: Diagram) -> "DiagramSummary":
        return cls(
            id=str(diagram.id),
            name=diagram.name,
            project_id=str(diagram.project_id),
            created_at=diagram.created_at,
            updated_at=diagram.updated_at,
        )


class DiagramResponse(DiagramSummary):
    """Full diagram including its opaque content"""

    content: Optional[str] = None

    @classmethod
    def from_diagram(cls, diagram: Diagram) -> "DiagramResponse":
        return cls(
            id=str(diagram.id),
            name=diagram.name,
            project_id=str(diagram.project_id),
            content=diagram.content,
            created_at=diagram.created_at,
            updated_at=diagram.updated_at,
        )


class DeleteDiagramResponse(BaseModel):
    """Response for delete diagram use case"""

    status: str
