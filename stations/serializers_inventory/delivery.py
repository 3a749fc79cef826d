from rest_framework import serializers

from stations.models_inventory import TankerDelivery


class TankerDeliverySerializer(serializers.ModelSerializer):
    station = serializers.UUIDField(source="tank.station_id", read_only=True)
    fuel_type = serializers.CharField(source="tank.fuel_type", read_only=True)
    recorded_by_employee_id = serializers.CharField(
        source="recorded_by.employee_id",
        read_only=True,
    )

    class Meta:
        model = TankerDelivery
        fields = [
            "id",
            "tank",
            "station",
            "fuel_type",
            "liters_delivered",
            "delivery_date",
            "ticket_number",
            "notes",
            "level_after",
            "recorded_by",
            "recorded_by_employee_id",
            "created_at",
        ]
        read_only_fields = fields


class TankerDeliveryCreateSerializer(serializers.Serializer):
    """
    tank_id is required on the station route, taken from the URL on the
    tank route.
    """

    tank_id = serializers.UUIDField(required=False)
    liters_delivered = serializers.DecimalField(max_digits=12, decimal_places=2)
    delivery_date = serializers.DateTimeField(required=False)
    ticket_number = serializers.CharField(max_length=100, required=False, allow_blank=True)
    notes = serializers.CharField(required=False, allow_blank=True)

    def validate_liters_delivered(self, value):
        if value <= 0:
            raise serializers.ValidationError("Delivered volume must be positive.")
        return value
