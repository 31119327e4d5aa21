import logging
import secrets
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from . import config
from .errors import AuthenticationError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

TOKEN_SALT = "admin-session"


def _serializer() -> URLSafeTimedSerializer:
    return URLSafeTimedSerializer(config.SECRET_KEY)


def constant_time_compare(a: str, b: str) -> bool:
    """Compare two strings in constant time to prevent timing attacks"""
    return secrets.compare_digest(a.encode(), b.encode())


def check_admin_credentials(username: Optional[str], password: Optional[str]) -> bool:
    """Exact match against both configured secrets; unset secrets never match"""
    if not config.ADMIN_USERNAME or not config.ADMIN_PASSWORD:
        logger.warning("Admin credentials not configured - rejecting login")
        return False
    if username is None or password is None:
        return False
    # Evaluate both comparisons so timing does not reveal which one failed
    user_ok = constant_time_compare(username, config.ADMIN_USERNAME)
    password_ok = constant_time_compare(password, config.ADMIN_PASSWORD)
    return user_ok and password_ok


def create_admin_token(username: str) -> str:
    return _serializer().dumps({"sub": username, "role": "admin"}, salt=TOKEN_SALT)


def verify_admin_token(token: str, max_age: Optional[int] = None) -> dict:
    """
    Verify and decode an admin token

    Raises:
        AuthenticationError: If the token is expired or tampered with
    """
    if max_age is None:
        max_age = config.ADMIN_TOKEN_MAX_AGE
    try:
        return _serializer().loads(token, salt=TOKEN_SALT, max_age=max_age)
    except SignatureExpired:
        logger.warning("Admin token expired")
        raise AuthenticationError("Session expired. Please log in again.")
    except BadSignature:
        logger.warning("Invalid admin token signature")
        raise AuthenticationError("Invalid token")


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """Dependency guarding admin-only endpoints"""
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Not authenticated. Please provide a valid Bearer token.")
    return verify_admin_token(credentials.credentials)
