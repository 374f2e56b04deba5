"""
Bearer-token authentication dependency.

Verifies the JWT issued by the auth service and yields the caller's user
id from its "id" claim. Token issuance lives outside this service.

Dependencies: fastapi, jwt (PyJWT), interview_prep.configs
System role: Request authentication
"""

import logging

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from interview_prep.api.deps.dependencies import get_settings_dependency
from interview_prep.configs import Settings
from interview_prep.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings_dependency),
) -> str:
    """
    Resolve the authenticated user id from the Authorization header.

    Args:
        credentials: Parsed bearer credentials, None when header is absent
        settings: Application settings (injected)

    Returns:
        str: User id from the token's "id" claim

    Raises:
        UnauthorizedError: If the token is missing, invalid or has no id
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Not authorized, no token")

    try:
        payload = jwt.decode(
            credentials.credentials,
            settings.auth.secret_key,
            algorithms=[settings.auth.algorithm],
        )
    except jwt.InvalidTokenError as e:
        logger.warning("Token verification failed", extra={"error": str(e)})
        raise UnauthorizedError("Not authorized, token failed", error=str(e)) from e

    user_id = payload.get("id")
    if not user_id:
        raise UnauthorizedError("Not authorized, token failed")
    return str(user_id)
