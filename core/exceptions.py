# core/exceptions.py
import logging

from django.db import IntegrityError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(APIException):
    """
    The request is well formed but collides with the current state
    (shift already open, shift locked, transfer already processed...).
    """

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict with the current state of the resource."
    default_code = "conflict"


def api_exception_handler(exc, context):
    """
    DRF handler + IntegrityError → 409.
    Every rejected request is logged with the view that rejected it.
    """

    if isinstance(exc, IntegrityError):
        exc = Conflict(str(exc))

    response = exception_handler(exc, context)

    view = context.get("view")
    view_name = view.__class__.__name__ if view else "-"

    if response is None:
        logger.exception("Unhandled error in %s", view_name)
        return None

    logger.warning(
        "%s rejected request (%s): %s",
        view_name,
        response.status_code,
        response.data,
    )

    return response
