# core/authentication.py
import logging

from django.contrib.auth import get_user_model
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

logger = logging.getLogger(__name__)

User = get_user_model()


class DevIdentityAuthentication(BaseAuthentication):
    """
    Development identity provider.

    Trusts the `X-Dev-Employee-Id` header and authenticates as that
    employee without any credential check. Only installed by settings when
    DEBUG and DEV_IDENTITY_ENABLED are both on; never part of the
    production authentication chain.
    """

    header = "HTTP_X_DEV_EMPLOYEE_ID"

    def authenticate(self, request):
        employee_id = request.META.get(self.header)

        if not employee_id:
            return None

        try:
            user = User.objects.select_related("station").get(
                employee_id=employee_id,
                is_active=True,
            )
        except User.DoesNotExist:
            raise AuthenticationFailed("Unknown employee for dev identity.")

        logger.debug("Dev identity: %s (%s)", user.employee_id, user.role)
        return (user, None)

    def authenticate_header(self, request):
        return "X-Dev-Employee-Id"
