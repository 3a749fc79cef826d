from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from stations.models import Station
from stations.permissions import ensure_station_access
from stations.serializers import TankSerializer, NozzleSerializer


class StationTanksView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        ensure_station_access(request.user, station.id)

        tanks = station.tanks.annotate(nozzle_count=Count("nozzles"))
        return Response(TankSerializer(tanks, many=True).data)


class StationNozzlesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, station_id):
        station = get_object_or_404(Station, id=station_id)
        ensure_station_access(request.user, station.id)

        nozzles = station.nozzles.select_related("tank")
        return Response(NozzleSerializer(nozzles, many=True).data)
