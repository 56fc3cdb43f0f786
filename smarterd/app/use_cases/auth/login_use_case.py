"""
Login Use Case

Handles user authentication and returns a signed access token.
"""

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.errors import AuthenticationError
from smarterd.libs.result import Result, Return

from .dtos import AuthResponse
from .passwords import DUMMY_HASH, check_password


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Same error for unknown login id and wrong password
    - Token subject is the login id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login_id: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            login_id: User login ID (surrounding whitespace ignored, as at signup)
            password: Plain text password

        Returns:
            Result with AuthResponse containing the token, or AuthenticationError
        """
        invalid = AuthenticationError("INVALID_CREDENTIALS", "Invalid login ID or password")

        async with self.uow:
            user = await self.uow.users.get_by_login_id(login_id.strip())

            # Always perform a hash check even if user not found
            if user is None:
                check_password(password, DUMMY_HASH)
                return Return.err(invalid)

            if not check_password(password, user.password_hash):
                return Return.err(invalid)

            from smarterd.api.utils.jwt import generate_jwt

            return Return.ok(
                AuthResponse(
                    token=generate_jwt(user.login_id),
                    login_id=user.login_id,
                    name=user.name,
                )
            )
