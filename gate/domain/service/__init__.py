"""Domain services."""

from .account_service import AccountService
from .auth_service import AuthService, FacebookGateway
from .base import Service
from .jwt_service import JWTService
from .picture_service import PICTURE_CONTENT_TYPES, FileStorage, PictureService

__all__ = [
    "AccountService",
    "AuthService",
    "FacebookGateway",
    "FileStorage",
    "JWTService",
    "PICTURE_CONTENT_TYPES",
    "PictureService",
    "Service",
]
