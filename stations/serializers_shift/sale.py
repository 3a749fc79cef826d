from rest_framework import serializers

from stations.models_shift import NozzleSale


class NozzleSaleSerializer(serializers.ModelSerializer):
    nozzle_name = serializers.CharField(source="nozzle.name", read_only=True)
    fuel_type = serializers.CharField(source="nozzle.fuel_type", read_only=True)
    amount = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = NozzleSale
        fields = [
            "id",
            "shift",
            "nozzle",
            "nozzle_name",
            "fuel_type",
            "quantity_liters",
            "price_per_liter",
            "amount",
            "card_amount",
            "cash_amount",
            "updated_at",
        ]
        read_only_fields = fields


class NozzleSaleUpdateSerializer(serializers.Serializer):
    quantity_liters = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )
    card_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )
    cash_amount = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, required=False
    )


class ShiftPaymentsSerializer(serializers.Serializer):
    card_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    cash_amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
