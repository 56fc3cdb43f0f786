"""
Authentication Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- SignupCommand: Input to use case (business intent)
- AuthResponse: Output of signup and login
"""

from pydantic import BaseModel


class SignupCommand(BaseModel):
    """
    Signup command - represents signup intent

    Created by API layer from the request body.
    Field constraints are enforced by the use case.
    """

    login_id: str
    password: str
    name: str


class AuthResponse(BaseModel):
    """Response for signup and login use cases"""

    token: str
    login_id: str
    name: str
