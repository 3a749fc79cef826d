from rest_framework import serializers

from cash.serializers import CashTransactionSerializer
from stations.constants import ShiftType
from stations.models_shift import Shift
from .reading import NozzleReadingSerializer
from .sale import NozzleSaleSerializer


class ShiftSerializer(serializers.ModelSerializer):
    station_name = serializers.CharField(source="station.name", read_only=True)

    class Meta:
        model = Shift
        fields = [
            "id",
            "station",
            "station_name",
            "sequence",
            "shift_type",
            "start_time",
            "end_time",
            "status",
            "locked",
            "locked_at",
            "locked_by",
            "unlocked_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ShiftCreateSerializer(serializers.Serializer):
    shift_type = serializers.ChoiceField(choices=ShiftType.choices)


class ShiftDetailSerializer(ShiftSerializer):
    readings = NozzleReadingSerializer(many=True, read_only=True)
    nozzle_sales = NozzleSaleSerializer(many=True, read_only=True)
    cash_transaction = serializers.SerializerMethodField()

    class Meta(ShiftSerializer.Meta):
        fields = ShiftSerializer.Meta.fields + [
            "readings",
            "nozzle_sales",
            "cash_transaction",
        ]
        read_only_fields = fields

    def get_cash_transaction(self, shift):
        cash_transaction = getattr(shift, "cash_transaction", None)
        if cash_transaction is None:
            return None
        return CashTransactionSerializer(cash_transaction).data
