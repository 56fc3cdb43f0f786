"""
Authentication Use Cases

Signup and login.
"""

from .dtos import AuthResponse, SignupCommand
from .login_use_case import LoginUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    "SignupUseCase",
    "LoginUseCase",
    "SignupCommand",
    "AuthResponse",
]
