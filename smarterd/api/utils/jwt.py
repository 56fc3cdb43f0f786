from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(login_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate JWT access token

    Args:
        login_id: User login ID, stored as the token subject
        expires_delta: Token lifetime (defaults to JWT_EXPIRATION_MINUTES)

    Returns:
        JWT token string (HS256)
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=ApplicationConfig.JWT_EXPIRATION_MINUTES)

    now = datetime.now(UTC)
    payload = {
        "sub": login_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[str]:
    """
    Verify JWT token and extract its subject

    Args:
        token: JWT token string

    Returns:
        Login ID from the "sub" claim, or None if the token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except JWTError:
        return None

    login_id = payload.get("sub")
    if not login_id:
        return None
    return login_id
