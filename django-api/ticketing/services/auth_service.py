"""Registration, login and session lookup."""

import logging

from ticketing.auth import BcryptPasswordHasher, Identity, TokenCodec
from ticketing.domain import NewUser, User
from ticketing.domain.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from ticketing.stores.interfaces import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """Service for identity operations. Returned users still carry the hash;
    serializers strip it."""

    def __init__(self, users: UserStore, hasher: BcryptPasswordHasher, tokens: TokenCodec) -> None:
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def register(self, registration: NewUser) -> tuple[User, str]:
        """Create a user and issue their first token.

        Raises:
            DuplicateEmailError: If the email is already registered.
        """
        if self._users.find_by_email(registration.email) is not None:
            logger.warning("Registration rejected: email already registered")
            raise DuplicateEmailError()

        user = self._users.create(registration)
        logger.info("Registered user %s", user.id)
        return user, self.issue_token(user)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Verify credentials and issue a token.

        Unknown email and wrong password are indistinguishable to the caller.

        Raises:
            InvalidCredentialsError: If the credentials do not match a user.
        """
        user = self._users.find_by_email(email)
        if user is None or not self._hasher.verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentialsError()

        logger.info("User %s logged in", user.id)
        return user, self.issue_token(user)

    def me(self, identity: Identity) -> User:
        """Return the user behind a verified token.

        Raises:
            UserNotFoundError: If the user no longer exists.
        """
        user = self._users.find_by_id(identity.user_id)
        if user is None:
            raise UserNotFoundError(identity.user_id.value)
        return user

    def issue_token(self, user: User) -> str:
        return self._tokens.issue(user.id, user.is_admin)
