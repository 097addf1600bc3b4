"""Change profile picture use case."""

from typing import NewType

import logfire
from pydantic import BaseModel

from gate.application.decorator import DbTransactionDecorator
from gate.application.usecase.base import BaseUseCase
from gate.domain.model import ProfilePicture
from gate.domain.service import AccountService, PictureService
from gate.domain.value import AccountId


class ChangeProfilePictureRequest(BaseModel):
    """Picture change request. Without content the picture is removed."""

    account_id: str
    content: bytes | None = None
    content_type: str | None = None


class ChangeProfilePictureResponse(BaseModel):
    """What the account shows now. Exactly one field is set."""

    picture_url: str | None = None
    initials: str | None = None


class ChangeProfilePictureUseCase(
    BaseUseCase[ChangeProfilePictureRequest, ChangeProfilePictureResponse]
):
    """Use case for uploading or removing an account's picture.

    An uploaded file replaces the picture. Without one the account falls back
    to initials of its name. If saving fails after an upload, the uploaded
    file is deleted again.
    """

    def __init__(
        self, picture_service: PictureService, account_service: AccountService
    ) -> None:
        self.picture_service = picture_service
        self.account_service = account_service

    async def execute(
        self, request: ChangeProfilePictureRequest
    ) -> ChangeProfilePictureResponse:
        """Store the new picture, or initials, on the account.

        Raises:
            NotFoundError: If the account does not exist
            ValueError: If the content type is not an accepted picture type
        """
        account_id = AccountId(request.account_id)

        with logfire.span(
            "change_profile_picture", account_id=account_id, upload=bool(request.content)
        ):
            stored = None
            if request.content:
                stored = await self.picture_service.upload(
                    account_id, request.content, request.content_type or ""
                )
                picture = ProfilePicture(picture_url=stored.url)
            else:
                profile = await self.account_service.load_profile(account_id)
                picture = ProfilePicture.for_account(None, profile.name)

            try:
                await self.account_service.save_picture(account_id, picture)
            except Exception:
                if stored is not None:
                    logfire.warn("Removing orphaned picture", key=stored.key)
                    await self.picture_service.delete(stored)
                raise

            return ChangeProfilePictureResponse(
                picture_url=picture.picture_url, initials=picture.initials
            )


# Picture change bracketed by a database transaction, the HTTP entry point
TransactionalChangeProfilePicture = NewType(
    "TransactionalChangeProfilePicture", DbTransactionDecorator
)
