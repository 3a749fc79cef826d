# cash/views.py
from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import JSONParser, MultiPartParser, FormParser
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.viewsets import ReadOnlyModelViewSet

from accounts.constants import UserRole
from accounts.permissions import IsStationManager, IsAreaManager
from cash.models import CashTransaction
from cash.serializers import (
    CashTransactionSerializer,
    CashTransactionCreateSerializer,
    DepositSerializer,
)
from cash.services.custody import (
    create_cash_transaction,
    initiate_transfer,
    accept_cash,
    deposit_cash,
)
from core.pagination import StandardResultsSetPagination


class CashTransactionViewSet(ReadOnlyModelViewSet):
    """
    Cash transactions, scoped by role:

    - SM : transactions of their station
    - AM : transactions handed to them or of the stations they manage
    - ADMIN : everything

    Custody transitions are actions on the transaction.
    """

    serializer_class = CashTransactionSerializer
    pagination_class = StandardResultsSetPagination
    filterset_fields = ["status", "station", "shift"]
    ordering_fields = ["created_at", "cash_to_am"]

    def get_permissions(self):
        if self.action == "transfer":
            return [IsAuthenticated(), IsStationManager()]
        if self.action in ("accept", "deposit"):
            return [IsAuthenticated(), IsAreaManager()]
        return [IsAuthenticated()]

    def get_queryset(self):
        user = self.request.user

        qs = CashTransaction.objects.select_related(
            "station",
            "transfer",
            "transfer__from_user",
            "transfer__to_user",
        )

        if user.is_admin_role:
            return qs

        if user.role == UserRole.AREA_MANAGER:
            return qs.filter(
                Q(transfer__to_user=user) | Q(station__area_manager=user)
            ).distinct()

        return qs.filter(station_id=user.station_id)

    def _respond(self, custody, code=status.HTTP_200_OK):
        serializer = CashTransactionSerializer(
            custody.transaction, context=self.get_serializer_context()
        )
        return Response(serializer.data, status=code)

    @action(detail=True, methods=["post"])
    def transfer(self, request, pk=None):
        custody = initiate_transfer(pk, request.user)
        return self._respond(custody, status.HTTP_201_CREATED)

    @action(detail=True, methods=["post"])
    def accept(self, request, pk=None):
        custody = accept_cash(pk, request.user)
        return self._respond(custody)

    @action(
        detail=True,
        methods=["post"],
        parser_classes=[MultiPartParser, FormParser, JSONParser],
    )
    def deposit(self, request, pk=None):
        serializer = DepositSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        custody = deposit_cash(
            pk,
            request.user,
            receipt_file=serializer.validated_data.get("receipt"),
            receipt_url=serializer.validated_data.get("receipt_url"),
        )
        return self._respond(custody)


class ShiftCashTransactionCreateView(APIView):
    permission_classes = [IsAuthenticated, IsStationManager]

    def post(self, request, shift_id):
        serializer = CashTransactionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        cash_transaction = create_cash_transaction(
            shift_id,
            request.user,
            **serializer.validated_data,
        )

        return Response(
            CashTransactionSerializer(cash_transaction).data,
            status=status.HTTP_201_CREATED,
        )
