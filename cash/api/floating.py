from decimal import Decimal

from django.db.models import Sum, Q
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import IsAuthenticated

from accounts.permissions import IsAdminRole
from cash.models import CashTransaction, CashStatus
from cash.serializers import CashTransactionSerializer


class FloatingCashAPIView(APIView):
    """
    Cash collected but not yet deposited in the bank.
    """

    permission_classes = [IsAuthenticated, IsAdminRole]

    def get(self, request):
        qs = (
            CashTransaction.objects
            .exclude(status=CashStatus.DEPOSITED)
            .select_related(
                "station",
                "transfer",
                "transfer__from_user",
                "transfer__to_user",
            )
        )

        totals = qs.aggregate(
            total=Sum("cash_to_am"),
            pending=Sum(
                "cash_to_am",
                filter=Q(status=CashStatus.PENDING_ACCEPTANCE),
            ),
            with_am=Sum(
                "cash_to_am",
                filter=Q(status=CashStatus.WITH_AM),
            ),
        )

        per_station = qs.values(
            "station_id",
            "station__name",
        ).annotate(
            floating=Sum("cash_to_am"),
        ).order_by("station__name")

        zero = Decimal("0.00")

        return Response({
            "total_floating": totals["total"] or zero,
            "breakdown": {
                "pending_acceptance": totals["pending"] or zero,
                "with_am": totals["with_am"] or zero,
            },
            "per_station": list(per_station),
            "transactions": CashTransactionSerializer(qs, many=True).data,
        })
