"""Bearer credential verification."""

from uuid import UUID

from src.notekeep.core.exceptions import (
    InvalidCredentialError,
    UnauthenticatedError,
    UnknownSubjectError,
)
from src.notekeep.core.security import ACCESS_TOKEN_TYPE, decode_token
from src.notekeep.models import User
from src.notekeep.repositories import UserRepository

BEARER_PREFIX = "Bearer "


class SessionVerifier:
    """Resolves an ``Authorization`` header to a live user record.

    Token claims other than ``sub`` are treated as a cache. The user row is
    re-read on every request so deleted accounts lose access immediately.
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def verify(self, authorization: str | None) -> User:
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            raise UnauthenticatedError("Missing or invalid authorization header")

        token = authorization[len(BEARER_PREFIX) :].strip()
        if not token:
            raise UnauthenticatedError("Missing or invalid authorization header")

        payload = decode_token(token)
        if payload is None:
            raise InvalidCredentialError()

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            raise InvalidCredentialError("Invalid token type")

        subject = payload.get("sub")
        if not subject:
            raise InvalidCredentialError("Invalid token payload")

        try:
            user_id = UUID(str(subject))
        except ValueError as e:
            raise InvalidCredentialError("Invalid token payload") from e

        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UnknownSubjectError()

        return user
