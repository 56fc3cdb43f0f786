"""
Smart ERD Domain Error Kinds

Every failure a use case can report is one of these kinds.
The HTTP layer maps each kind to a single status code.
"""

from smarterd.libs.result import Error


class NotFoundError(Error):
    """Referenced user/team/project/membership does not exist"""


class AuthorizationError(Error):
    """Membership or role requirement unmet"""


class BusinessRuleError(Error):
    """Owner protection violated or resource scoped to another team/project"""


class ConflictError(Error):
    """Duplicate membership or duplicate login id"""


class ValidationError(Error):
    """Field constraint violated"""


class AuthenticationError(Error):
    """Login id / password pair rejected"""


def validate_length(
    field: str, value, min_length: int, max_length: int, code: str, strip: bool = True
):
    """Return a ValidationError when value is missing or outside [min, max] chars"""
    if value is None:
        return ValidationError(code, f"{field} is required")
    if strip:
        value = value.strip()
    if not min_length <= len(value) <= max_length:
        return ValidationError(
            code,
            f"{field} must be between {min_length} and {max_length} characters",
        )
    return None


class DuplicateRecordError(Exception):
    """Raised by a repository when a uniqueness constraint rejects a write"""
