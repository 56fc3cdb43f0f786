import logging

from smarterd.app.services.unit_of_work import UnitOfWork
from smarterd.domain.entities import User
from smarterd.domain.errors import ConflictError, DuplicateRecordError, validate_length
from smarterd.libs.result import Result, Return

from .dtos import AuthResponse, SignupCommand
from .passwords import hash_password

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand
    - Output: Result[AuthResponse]

    Business Logic:
    1. Validate field lengths (login_id 2-50 trimmed, password 8-100 as typed, name 1-50)
    2. Reject an already registered login_id
    3. Hash password (SHA-256 pre-hash, then bcrypt cost factor 12)
    4. Create User and commit
    5. Issue an access token whose subject is the login_id
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[AuthResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with login_id, password, name

        Returns:
            Result[AuthResponse] with token, login_id and name
            or ValidationError / ConflictError(LOGIN_ID_ALREADY_EXISTS)
        """
        # Login ids and names are stored trimmed; passwords are kept exactly as typed
        login_id = command.login_id.strip()
        for error in (
            validate_length("login_id", login_id, 2, 50, "INVALID_LOGIN_ID"),
            validate_length(
                "password", command.password, 8, 100, "INVALID_PASSWORD", strip=False
            ),
            validate_length("name", command.name, 1, 50, "INVALID_NAME"),
        ):
            if error is not None:
                return Return.err(error)

        async with self.uow:
            if await self.uow.users.exists_by_login_id(login_id):
                return Return.err(
                    ConflictError(
                        "LOGIN_ID_ALREADY_EXISTS",
                        f"Login ID already exists: {login_id}",
                    )
                )

            user = User(
                login_id=login_id,
                password_hash=hash_password(command.password),
                name=command.name.strip(),
            )

            # A concurrent signup with the same login_id loses on the unique index
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateRecordError:
                await self.uow.rollback()
                return Return.err(
                    ConflictError(
                        "LOGIN_ID_ALREADY_EXISTS",
                        f"Login ID already exists: {login_id}",
                    )
                )

            logger.info(f"User signed up: {user.login_id}")

            # Import JWT utility here to avoid circular dependency
            from smarterd.api.utils.jwt import generate_jwt

            return Return.ok(
                AuthResponse(
                    token=generate_jwt(user.login_id),
                    login_id=user.login_id,
                    name=user.name,
                )
            )
