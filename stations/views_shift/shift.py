# stations/views_shift/shift.py

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsAdminRole, IsStationManager
from core.pagination import StandardResultsSetPagination
from stations.models import Station
from stations.models_shift import Shift
from stations.permissions import ensure_station_access
from stations.serializers_shift import (
    ShiftSerializer,
    ShiftCreateSerializer,
    ShiftDetailSerializer,
)
from stations.services.shift import (
    create_shift,
    get_current_shift,
    lock_shift,
    unlock_shift,
    delete_shift,
)


def get_accessible_shift(request, shift_id, queryset=None):
    if queryset is None:
        queryset = Shift.objects.all()

    shift = get_object_or_404(queryset, id=shift_id)
    ensure_station_access(request.user, shift.station_id)
    return shift


# =========================
# STATION SHIFTS
# =========================

class CurrentShiftView(APIView):
    """
    The OPEN, unlocked shift of the station (null when none).
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        ensure_station_access(request.user, station.id)

        shift = get_current_shift(station.id)
        if shift is None:
            return Response(None)

        return Response(ShiftSerializer(shift).data)


class StationShiftListView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        ensure_station_access(request.user, station.id)

        shifts = (
            Shift.objects
            .filter(station=station)
            .select_related("station", "cash_transaction")
            .prefetch_related("readings__nozzle", "nozzle_sales__nozzle")
        )

        paginator = StandardResultsSetPagination()
        page = paginator.paginate_queryset(shifts, request, view=self)
        data = ShiftDetailSerializer(page, many=True).data
        return paginator.get_paginated_response(data)


class ShiftCreateView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def post(self, request, station_id):
        ensure_station_access(request.user, station_id)

        serializer = ShiftCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        shift = create_shift(
            station_id,
            serializer.validated_data["shift_type"],
            user=request.user,
        )

        return Response(
            ShiftDetailSerializer(shift).data,
            status=status.HTTP_201_CREATED,
        )


# =========================
# ONE SHIFT
# =========================

class ShiftDetailView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, shift_id):
        shift = get_accessible_shift(
            request,
            shift_id,
            Shift.objects.select_related("station").prefetch_related(
                "readings__nozzle", "nozzle_sales__nozzle"
            ),
        )
        return Response(ShiftDetailSerializer(shift).data)


class ShiftDeleteView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]

    def delete(self, request, shift_id):
        delete_shift(shift_id, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ShiftLockView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def post(self, request, shift_id):
        get_accessible_shift(request, shift_id)
        shift = lock_shift(shift_id, request.user)
        return Response(ShiftSerializer(shift).data)


class ShiftUnlockView(APIView):
    permission_classes = [IsAuthenticated, IsAdminRole]

    def post(self, request, shift_id):
        shift = unlock_shift(shift_id, request.user)
        return Response(ShiftSerializer(shift).data)
