# core/storage.py
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage
from django.utils import timezone
from rest_framework.exceptions import ValidationError

ALLOWED_RECEIPT_EXTENSIONS = {".pdf", ".png", ".jpg", ".jpeg", ".webp"}


def store_receipt(uploaded_file):
    """
    Stores a deposit receipt through the default storage (local media or
    S3) and returns its storage name and public URL.
    """

    extension = os.path.splitext(uploaded_file.name)[1].lower()

    if extension not in ALLOWED_RECEIPT_EXTENSIONS:
        raise ValidationError(
            {"receipt": f"Unsupported receipt type: {extension or 'none'}."}
        )

    if uploaded_file.size > settings.RECEIPT_MAX_BYTES:
        raise ValidationError(
            {"receipt": "Receipt file is too large."}
        )

    name = "{dir}/{date:%Y/%m}/receipt-{token}{ext}".format(
        dir=settings.RECEIPT_UPLOAD_DIR,
        date=timezone.now(),
        token=uuid.uuid4().hex,
        ext=extension,
    )

    saved_name = default_storage.save(name, uploaded_file)
    return saved_name, default_storage.url(saved_name)


def discard_receipt(name):
    default_storage.delete(name)
