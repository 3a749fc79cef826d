# accounts/views.py
import logging

from django.contrib.auth import get_user_model
from rest_framework import viewsets, status
from rest_framework.filters import SearchFilter, OrderingFilter
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from django_filters.rest_framework import DjangoFilterBackend

from accounts.permissions import IsAdminRole
from accounts.serializers import UserSerializer, MeSerializer
from core.pagination import StandardResultsSetPagination

logger = logging.getLogger(__name__)

User = get_user_model()


class UserViewSet(viewsets.ModelViewSet):
    """
    Employee management (ADMIN).
    Users are deactivated, never deleted.
    """

    serializer_class = UserSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    pagination_class = StandardResultsSetPagination
    http_method_names = ["get", "post", "patch"]

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ["role", "station", "is_active"]
    search_fields = ["employee_id", "username", "first_name", "last_name", "email"]
    ordering_fields = ["employee_id", "date_joined"]

    def get_queryset(self):
        return (
            User.objects
            .select_related("station", "area_manager")
            .order_by("-date_joined")
        )

    def perform_create(self, serializer):
        user = serializer.save()
        logger.info(
            "User %s created with role %s by %s",
            user.employee_id, user.role, self.request.user.employee_id,
        )


class MeView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = MeSerializer(request.user, context={"request": request})
        return Response(serializer.data, status=status.HTTP_200_OK)
