import hmac
import logging
from typing import Optional

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skillnest.core.config import settings
from skillnest.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def require_function_key(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> None:
    """
    Static bearer token check shared by every endpoint.
    A no-op when SKILLNEST_FUNCTION_KEY is not configured.
    """
    expected = settings.function_key
    if not expected:
        return
    if credentials is None or not hmac.compare_digest(credentials.credentials, expected):
        logger.warning("Authentication failed: bad or missing bearer token")
        raise AuthenticationError()


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Owner of the rows being read or written. Identity itself comes from the
    external auth provider; the caller forwards the resolved user id.
    """
    if not x_user_id or not x_user_id.strip():
        raise AuthenticationError(f"Missing {settings.user_id_header} header")
    return x_user_id.strip()
