from django.db.models import Count
from rest_framework.permissions import IsAuthenticated
from rest_framework.viewsets import ModelViewSet

from accounts.constants import UserRole
from accounts.permissions import IsAdminOrReadOnly
from core.pagination import StandardResultsSetPagination
from stations.models import Station
from stations.models_inventory import Tank, Nozzle
from stations.serializers import (
    StationSerializer,
    StationDetailSerializer,
    TankSerializer,
    NozzleSerializer,
)


class StationScopedMixin:
    """
    SM sees their own station, AM the stations they manage, ADMIN all.
    `station_lookup` is the path from the queryset model to the station.
    """

    station_lookup = "station"

    def scope_to_user(self, qs):
        user = self.request.user

        if user.is_admin_role:
            return qs

        if user.role == UserRole.AREA_MANAGER:
            return qs.filter(**{f"{self.station_lookup}__area_manager": user})

        return qs.filter(**{f"{self.station_lookup}_id": user.station_id})


class StationViewSet(ModelViewSet):
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    search_fields = ["name", "address"]
    ordering_fields = ["name", "created_at"]
    filterset_fields = ["area_manager"]

    def get_serializer_class(self):
        if self.action == "retrieve":
            return StationDetailSerializer
        return StationSerializer

    def get_queryset(self):
        user = self.request.user
        qs = Station.objects.select_related("area_manager")

        if self.action == "retrieve":
            qs = qs.prefetch_related("nozzles", "tanks")

        if user.is_admin_role:
            return qs

        if user.role == UserRole.AREA_MANAGER:
            return qs.filter(area_manager=user)

        return qs.filter(id=user.station_id)


class TankViewSet(StationScopedMixin, ModelViewSet):
    serializer_class = TankSerializer
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    filterset_fields = ["station", "fuel_type"]
    ordering_fields = ["fuel_type", "current_level"]

    def get_queryset(self):
        qs = (
            Tank.objects
            .select_related("station")
            .annotate(nozzle_count=Count("nozzles"))
        )
        return self.scope_to_user(qs)


class NozzleViewSet(StationScopedMixin, ModelViewSet):
    serializer_class = NozzleSerializer
    permission_classes = [IsAuthenticated, IsAdminOrReadOnly]
    pagination_class = StandardResultsSetPagination
    filterset_fields = ["station", "tank", "fuel_type"]
    search_fields = ["name"]

    def get_queryset(self):
        qs = Nozzle.objects.select_related("station", "tank")
        return self.scope_to_user(qs)
