"""Maps domain errors to HTTP responses.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Every body has the
shape ``{"message": ...}``; unexpected failures get the view's generic
message and never the exception text.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from ticketing.domain.errors import DomainError, ErrorCode
from ticketing.handlers.serializers import first_error_message

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.DUPLICATE_BOOKING: status.HTTP_400_BAD_REQUEST,
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.PRIVILEGE_REQUIRED: status.HTTP_403_FORBIDDEN,
    ErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

DEFAULT_FAILURE_MESSAGE = "Internal server error"


def failure_message(context: dict) -> str:
    view = context.get("view")
    request = context.get("request")
    messages = getattr(view, "failure_messages", {})
    method = getattr(request, "method", None)
    return messages.get(method, DEFAULT_FAILURE_MESSAGE)


def domain_exception_handler(exc: Exception, context: dict) -> Response:
    if isinstance(exc, DomainError):
        return Response({"message": exc.message}, status=STATUS_BY_CODE[exc.code])

    if isinstance(exc, APIException):
        # Framework errors: malformed JSON, unsupported method or media type.
        response = drf_exception_handler(exc, context)
        if response is not None:
            response.data = {"message": first_error_message(exc.detail)}
            return response

    logger.error("Unhandled error in %s", context.get("view").__class__.__name__, exc_info=exc)
    set_rollback()
    return Response(
        {"message": failure_message(context)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
