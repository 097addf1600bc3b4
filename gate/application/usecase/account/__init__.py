"""Account use cases."""

from .change_profile_picture import (
    ChangeProfilePictureRequest,
    ChangeProfilePictureResponse,
    ChangeProfilePictureUseCase,
    TransactionalChangeProfilePicture,
)

__all__ = [
    "ChangeProfilePictureRequest",
    "ChangeProfilePictureResponse",
    "ChangeProfilePictureUseCase",
    "TransactionalChangeProfilePicture",
]
