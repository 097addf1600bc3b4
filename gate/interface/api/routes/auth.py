"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from gate.application.usecase.auth import TransactionalFacebookLogin
from gate.application.usecase.auth.facebook_login import (
    FacebookLoginRequest,
    FacebookLoginResponse,
)
from gate.domain.error import AuthenticationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post("/facebook", response_model=FacebookLoginResponse)
async def facebook_login(
    request: FacebookLoginRequest,
    facebook_login: FromDishka[TransactionalFacebookLogin],
) -> FacebookLoginResponse:
    """Log in with a token issued by the Facebook SDK.

    Creates the account on first login, refreshes it afterwards, and returns
    a fresh access token. The account write is committed only if the whole
    login succeeds.

    Args:
        request: Login request with the Facebook client token
        facebook_login: Transactional Facebook login use case from DI

    Returns:
        Access token for the account

    Raises:
        HTTPException: 401 if Facebook rejects the token, 500 on other failures

    Example:
        POST /auth/facebook
        {
            "token": "EAAB..."
        }

        Response:
        {
            "access_token": "eyJhbGciOi..."
        }
    """
    try:
        return await facebook_login.execute(request)
    except AuthenticationError as e:
        logger.info(f"Facebook login rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )
    except Exception:
        logger.exception("Unexpected error during Facebook login")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error",
        )
