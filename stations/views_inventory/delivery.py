# stations/views_inventory/delivery.py

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.generics import ListAPIView
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsStationManager
from core.pagination import StandardResultsSetPagination
from stations.models import Station
from stations.models_inventory import Tank, TankerDelivery
from stations.permissions import ensure_station_access
from stations.serializers import TankSerializer
from stations.serializers_inventory import (
    TankerDeliverySerializer,
    TankerDeliveryCreateSerializer,
)
from stations.services.delivery import record_tanker_delivery
from stations.views import StationScopedMixin


class DeliveryCreateMixin:
    permission_classes = [IsAuthenticated, IsStationManager]

    def record(self, request, station_id, tank_id=None):
        ensure_station_access(request.user, station_id)

        serializer = TankerDeliveryCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        tank_id = tank_id or data.get("tank_id")
        if tank_id is None:
            raise ValidationError({"tank_id": "This field is required."})

        delivery, tank = record_tanker_delivery(
            tank_id=tank_id,
            liters=data["liters_delivered"],
            user=request.user,
            station_id=station_id,
            delivery_date=data.get("delivery_date"),
            ticket_number=data.get("ticket_number", ""),
            notes=data.get("notes", ""),
        )

        return Response(
            {
                "delivery": TankerDeliverySerializer(delivery).data,
                "tank": TankSerializer(tank).data,
            },
            status=status.HTTP_201_CREATED,
        )


class StationDeliveryCreateView(DeliveryCreateMixin, APIView):
    def post(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        return self.record(request, station.id)


class TankDeliveryCreateView(DeliveryCreateMixin, APIView):
    def post(self, request, tank_id):
        tank = get_object_or_404(Tank, id=tank_id)
        return self.record(request, tank.station_id, tank.id)


class DeliveryListView(StationScopedMixin, ListAPIView):
    serializer_class = TankerDeliverySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = StandardResultsSetPagination
    station_lookup = "tank__station"
    filterset_fields = ["tank", "tank__station"]
    ordering_fields = ["delivery_date", "liters_delivered"]

    def get_queryset(self):
        qs = TankerDelivery.objects.select_related("tank", "recorded_by")
        return self.scope_to_user(qs)
