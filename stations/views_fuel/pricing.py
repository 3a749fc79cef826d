from django.shortcuts import get_object_or_404
from rest_framework import generics
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminRole
from core.pagination import StandardResultsSetPagination
from stations.models import Station
from stations.models_pricing import FuelPrice
from stations.permissions import ensure_station_access
from stations.serializers import FuelPriceSerializer
from stations.services.pricing import get_current_prices, set_fuel_price


class FuelPriceListCreateView(generics.ListCreateAPIView):
    """
    Full price history (ADMIN). A new price never overwrites an older one,
    it takes over from its effective date.
    """

    serializer_class = FuelPriceSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    pagination_class = StandardResultsSetPagination
    filterset_fields = ["station", "fuel_type"]
    ordering_fields = ["effective_from", "created_at"]

    def get_queryset(self):
        return FuelPrice.objects.select_related("station", "created_by")

    def perform_create(self, serializer):
        data = serializer.validated_data
        serializer.instance = set_fuel_price(
            station=data["station"],
            fuel_type=data["fuel_type"],
            price_per_liter=data["price_per_liter"],
            user=self.request.user,
            effective_from=data.get("effective_from"),
        )


class StationCurrentPricesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        ensure_station_access(request.user, station.id)

        prices = get_current_prices(station)
        return Response(
            FuelPriceSerializer(
                sorted(prices.values(), key=lambda price: price.fuel_type),
                many=True,
            ).data
        )
