"""Account routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Header, HTTPException, UploadFile, status

from gate.application.usecase.account import (
    ChangeProfilePictureRequest,
    ChangeProfilePictureResponse,
    TransactionalChangeProfilePicture,
)
from gate.application.usecase.auth import GetCurrentAccountUseCase
from gate.application.usecase.auth.get_current_account import (
    GetCurrentAccountRequest,
    GetCurrentAccountResponse,
)
from gate.domain.error import NotFoundError
from gate.domain.service import PICTURE_CONTENT_TYPES, JWTService
from gate.domain.value import AccountId
from gate.util.jwt import InvalidTokenError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["accounts"], route_class=DishkaRoute)

UNSUPPORTED_PICTURE = "Unsupported file type. Allowed: " + ", ".join(
    PICTURE_CONTENT_TYPES.values()
)


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def access_denied() -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")


def authenticated_account_id(
    authorization: str | None, jwt_service: JWTService
) -> AccountId:
    """Account ID behind the bearer token.

    Raises:
        HTTPException: 403 if the token is missing or invalid
    """
    token = bearer_token(authorization)
    if not token:
        raise access_denied()
    try:
        return AccountId(jwt_service.validate(token))
    except InvalidTokenError:
        raise access_denied()


@router.get("/me", response_model=GetCurrentAccountResponse)
async def get_current_account(
    get_current_account_use_case: FromDishka[GetCurrentAccountUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentAccountResponse:
    """Get the account behind the bearer token.

    Raises:
        HTTPException: 403 if the token is missing or invalid, 404 if the
            account no longer exists
    """
    token = bearer_token(authorization)
    if not token:
        raise access_denied()

    try:
        return await get_current_account_use_case.execute(
            GetCurrentAccountRequest(token=token)
        )
    except InvalidTokenError:
        raise access_denied()
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.put("/me/picture", response_model=ChangeProfilePictureResponse)
async def change_profile_picture(
    change_picture: FromDishka[TransactionalChangeProfilePicture],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    picture: UploadFile | None = File(default=None),
) -> ChangeProfilePictureResponse:
    """Upload a new profile picture as multipart field ``picture``.

    Raises:
        HTTPException: 403 if the token is missing or invalid, 400 if the
            file is missing, empty or not a png/jpg/jpeg image, 404 if the
            account no longer exists

    Example:
        PUT /accounts/me/picture
        Content-Type: multipart/form-data; boundary=...

        Response:
        {
            "picture_url": "https://bucket.s3.amazonaws.com/...",
            "initials": null
        }
    """
    account_id = authenticated_account_id(authorization, jwt_service)

    if picture is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Picture is required"
        )
    content = await picture.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Picture is required"
        )
    content_type = (picture.content_type or "").split(";")[0].strip().lower()
    if content_type not in PICTURE_CONTENT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=UNSUPPORTED_PICTURE
        )

    return await _change_picture(
        change_picture,
        ChangeProfilePictureRequest(
            account_id=account_id, content=content, content_type=content_type
        ),
    )


@router.delete("/me/picture", response_model=ChangeProfilePictureResponse)
async def remove_profile_picture(
    change_picture: FromDishka[TransactionalChangeProfilePicture],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> ChangeProfilePictureResponse:
    """Remove the profile picture; the account shows its initials instead.

    Raises:
        HTTPException: 403 if the token is missing or invalid, 404 if the
            account no longer exists
    """
    account_id = authenticated_account_id(authorization, jwt_service)
    return await _change_picture(
        change_picture, ChangeProfilePictureRequest(account_id=account_id)
    )


async def _change_picture(
    use_case: TransactionalChangeProfilePicture,
    request: ChangeProfilePictureRequest,
) -> ChangeProfilePictureResponse:
    try:
        return await use_case.execute(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        logger.exception("Unexpected error while changing profile picture")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected error",
        )
