from rest_framework import serializers

from stations.models_shift import NozzleReading


class NozzleReadingSerializer(serializers.ModelSerializer):
    nozzle_name = serializers.CharField(source="nozzle.name", read_only=True)
    tank = serializers.UUIDField(source="nozzle.tank_id", read_only=True)
    fuel_type = serializers.CharField(source="nozzle.fuel_type", read_only=True)

    class Meta:
        model = NozzleReading
        fields = [
            "id",
            "shift",
            "nozzle",
            "nozzle_name",
            "tank",
            "fuel_type",
            "opening_reading",
            "closing_reading",
            "consumption",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ReadingItemSerializer(serializers.Serializer):
    nozzle_id = serializers.UUIDField()
    closing_reading = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0)


class ReadingsSubmitSerializer(serializers.Serializer):
    # Defaults to the station of the shift
    station_id = serializers.UUIDField(required=False)
    readings = ReadingItemSerializer(many=True, allow_empty=False)


class ReadingUpdateSerializer(serializers.Serializer):
    closing_reading = serializers.DecimalField(max_digits=14, decimal_places=2, min_value=0)
