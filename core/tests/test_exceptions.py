import logging

from django.db import IntegrityError
from rest_framework.exceptions import NotFound
from rest_framework.views import APIView

from core.exceptions import Conflict, api_exception_handler


class DummyView(APIView):
    pass


def context():
    return {"view": DummyView(), "args": (), "kwargs": {}}


def test_integrity_error_becomes_conflict():
    response = api_exception_handler(IntegrityError("duplicate key"), context())

    assert response.status_code == 409


def test_conflict_status():
    response = api_exception_handler(Conflict("Shift is locked."), context())

    assert response.status_code == 409
    assert response.data == {"detail": "Shift is locked."}


def test_rejections_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="core.exceptions"):
        api_exception_handler(NotFound("Tank not found."), context())

    assert "DummyView" in caplog.text


def test_unhandled_errors_are_left_to_django(caplog):
    with caplog.at_level(logging.ERROR, logger="core.exceptions"):
        response = api_exception_handler(ZeroDivisionError(), context())

    assert response is None
    assert "Unhandled error" in caplog.text
