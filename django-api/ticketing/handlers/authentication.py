"""Access control gate.

Authentication here never rejects a request. A missing header, another
scheme, a malformed token, a bad signature and an expired token all leave
the request anonymous (``request.user is None``), so public endpoints stay
public. Endpoints that need a caller enforce it with the permission classes
below, which turn "anonymous" into 401 and "not admin" into 403.
"""

import logging

from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.permissions import SAFE_METHODS, BasePermission

from ticketing.auth import Identity, TokenCodec
from ticketing.domain.errors import AuthenticationRequiredError, PrivilegeRequiredError

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(BaseAuthentication):
    """Resolves ``Authorization: Bearer <token>`` to an Identity."""

    keyword = b"bearer"

    def __init__(self, tokens: TokenCodec) -> None:
        self._tokens = tokens

    def authenticate(self, request) -> tuple[Identity, str] | None:
        parts = get_authorization_header(request).split()
        if len(parts) != 2 or parts[0].lower() != self.keyword:
            return None
        try:
            token = parts[1].decode("ascii")
        except UnicodeDecodeError:
            return None

        identity = self._tokens.verify(token)
        if identity is None:
            logger.debug("Ignoring invalid or expired bearer token")
            return None
        return identity, token

    def authenticate_header(self, request) -> str:
        return 'Bearer realm="api"'


def _identity(request) -> Identity:
    identity = request.user
    if not isinstance(identity, Identity):
        raise AuthenticationRequiredError()
    return identity


class RequiresIdentity(BasePermission):
    """Any verified caller."""

    def has_permission(self, request, view) -> bool:
        _identity(request)
        return True


class RequiresAdmin(BasePermission):
    """Verified caller with the admin flag."""

    def has_permission(self, request, view) -> bool:
        if not _identity(request).is_admin:
            raise PrivilegeRequiredError()
        return True


class AdminOrReadOnly(BasePermission):
    """Reads are public; writes require an admin."""

    def has_permission(self, request, view) -> bool:
        if request.method in SAFE_METHODS:
            return True
        return RequiresAdmin().has_permission(request, view)
