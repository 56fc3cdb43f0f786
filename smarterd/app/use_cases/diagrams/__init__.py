"""
Diagram Use Cases

Diagrams live inside projects; their content is an opaque blob.
"""

from .create_diagram_use_case import CreateDiagramUseCase
from .delete_diagram_use_case import DeleteDiagramUseCase
from .dtos import DeleteDiagramResponse, DiagramResponse, DiagramSummary
from .get_diagram_use_case import GetDiagramUseCase
from .get_diagrams_use_case import GetDiagramsUseCase
from .update_diagram_use_case import UpdateDiagramUseCase

__all__ = [
    "CreateDiagramUseCase",
    "GetDiagramsUseCase",
    "GetDiagramUseCase",
    "UpdateDiagramUseCase",
    "DeleteDiagramUseCase",
    "DiagramSummary",
    "DiagramResponse",
    "DeleteDiagramResponse",
]
