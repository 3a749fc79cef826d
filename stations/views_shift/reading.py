# stations/views_shift/reading.py

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsStationManager
from stations.models_shift import NozzleReading
from stations.serializers_shift import (
    NozzleReadingSerializer,
    ReadingsSubmitSerializer,
    ReadingUpdateSerializer,
)
from stations.services.reconciliation import (
    submit_shift_readings,
    update_shift_reading,
)
from .shift import get_accessible_shift


class ShiftReadingsView(APIView):
    """
    GET  : readings of the shift
    POST : closing readings {readings: [{nozzle_id, closing_reading}]}
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsAuthenticated(), IsStationManager()]
        return [IsAuthenticated()]

    def get(self, request, shift_id):
        shift = get_accessible_shift(request, shift_id)

        readings = NozzleReading.objects.filter(shift=shift).select_related("nozzle")
        return Response(NozzleReadingSerializer(readings, many=True).data)

    def post(self, request, shift_id):
        shift = get_accessible_shift(request, shift_id)

        serializer = ReadingsSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        readings = submit_shift_readings(
            shift.id,
            serializer.validated_data.get("station_id", shift.station_id),
            serializer.validated_data["readings"],
        )

        return Response(
            NozzleReadingSerializer(readings, many=True).data,
            status=status.HTTP_201_CREATED,
        )


class ShiftReadingUpdateView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def put(self, request, shift_id, reading_id):
        shift = get_accessible_shift(request, shift_id)

        serializer = ReadingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        reading = update_shift_reading(
            shift.id,
            reading_id,
            serializer.validated_data["closing_reading"],
        )
        return Response(NozzleReadingSerializer(reading).data)
