# stations/views_fuel/sales.py

from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.permissions import IsStationManager
from cash.serializers import CashTransactionSerializer
from stations.models_shift import NozzleSale
from stations.permissions import ensure_station_access
from stations.serializers_shift import (
    ShiftSerializer,
    NozzleSaleSerializer,
    NozzleSaleUpdateSerializer,
    ShiftPaymentsSerializer,
)
from stations.services.sales import (
    list_shift_sales,
    update_nozzle_sale,
    update_shift_payments,
    submit_nozzle_sales,
)
from stations.views_shift.shift import get_accessible_shift


class ShiftSalesView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request, shift_id):
        shift = get_accessible_shift(request, shift_id)
        sales = list_shift_sales(shift.id)
        return Response(NozzleSaleSerializer(sales, many=True).data)


class NozzleSaleUpdateView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def put(self, request, sale_id):
        sale = get_object_or_404(
            NozzleSale.objects.select_related("shift"), id=sale_id
        )
        ensure_station_access(request.user, sale.shift.station_id)

        serializer = NozzleSaleUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sale = update_nozzle_sale(sale.id, **serializer.validated_data)
        return Response(NozzleSaleSerializer(sale).data)


class ShiftPaymentsView(APIView):
    """
    Card / cash totals of the shift, written on every sale row.
    """

    permission_classes = [IsAuthenticated, IsStationManager]

    def put(self, request, shift_id):
        shift = get_accessible_shift(request, shift_id)

        serializer = ShiftPaymentsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sales = update_shift_payments(shift.id, **serializer.validated_data)
        return Response(NozzleSaleSerializer(sales, many=True).data)


class ShiftSalesSubmitView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def post(self, request, shift_id):
        shift = get_accessible_shift(request, shift_id)

        result = submit_nozzle_sales(shift.id, request.user)

        return Response({
            "shift": ShiftSerializer(result["shift"]).data,
            "sales": NozzleSaleSerializer(result["sales"], many=True).data,
            "cash_transaction": CashTransactionSerializer(
                result["cash_transaction"]
            ).data,
        })
