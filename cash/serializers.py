from rest_framework import serializers

from cash.models import CashTransaction, CashTransfer


class CashTransferSerializer(serializers.ModelSerializer):
    from_employee_id = serializers.CharField(source="from_user.employee_id", read_only=True)
    to_employee_id = serializers.CharField(source="to_user.employee_id", read_only=True)

    class Meta:
        model = CashTransfer
        fields = [
            "id",
            "cash_transaction",
            "from_user",
            "from_employee_id",
            "to_user",
            "to_employee_id",
            "status",
            "receipt_url",
            "accepted_at",
            "deposited_at",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CashTransactionSerializer(serializers.ModelSerializer):
    station_name = serializers.CharField(source="station.name", read_only=True)
    transfer = CashTransferSerializer(read_only=True)

    class Meta:
        model = CashTransaction
        fields = [
            "id",
            "shift",
            "station",
            "station_name",
            "liters_sold",
            "rate_per_liter",
            "total_revenue",
            "card_payments",
            "cash_on_hand",
            "bank_deposit",
            "cash_to_am",
            "declared_cash",
            "status",
            "created_by",
            "transfer",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class CashTransactionCreateSerializer(serializers.Serializer):
    liters_sold = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    rate_per_liter = serializers.DecimalField(max_digits=10, decimal_places=4, min_value=0)
    card_payments = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=0, required=False, default=0
    )
    bank_deposit = serializers.DecimalField(
        max_digits=14, decimal_places=2, min_value=0, required=False, default=0
    )


class DepositSerializer(serializers.Serializer):
    receipt = serializers.FileField(required=False)
    receipt_url = serializers.CharField(max_length=500, required=False, allow_blank=False)

    def validate(self, attrs):
        if not attrs.get("receipt") and not attrs.get("receipt_url"):
            raise serializers.ValidationError(
                {"receipt": "A deposit receipt file or URL is required."}
            )
        return attrs
