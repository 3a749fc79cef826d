from rest_framework import serializers

from stations.models import Station
from stations.models_inventory import Tank, Nozzle
from stations.models_pricing import FuelPrice


class StationSerializer(serializers.ModelSerializer):
    area_manager_employee_id = serializers.CharField(
        source="area_manager.employee_id",
        read_only=True,
        default=None,
    )

    class Meta:
        model = Station
        fields = [
            "id",
            "name",
            "address",
            "area_manager",
            "area_manager_employee_id",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ("created_at", "updated_at")


class TankSerializer(serializers.ModelSerializer):
    nozzle_count = serializers.IntegerField(read_only=True, default=0)

    class Meta:
        model = Tank
        fields = [
            "id",
            "station",
            "fuel_type",
            "capacity",
            "current_level",
            "nozzle_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ("created_at", "updated_at")

    def validate(self, attrs):
        # Levels only move through deliveries, readings and sales.
        if self.instance is not None:
            attrs.pop("current_level", None)

        capacity = attrs.get("capacity", getattr(self.instance, "capacity", None))
        level = attrs.get(
            "current_level",
            getattr(self.instance, "current_level", 0),
        )

        if attrs.get("current_level") is not None and attrs["current_level"] < 0:
            raise serializers.ValidationError(
                {"current_level": "Level must not be negative."}
            )

        if capacity is not None:
            if capacity <= 0:
                raise serializers.ValidationError(
                    {"capacity": "Capacity must be positive."}
                )
            if level > capacity:
                raise serializers.ValidationError(
                    {"capacity": "Capacity is below the current level."}
                )

        return attrs


class NozzleSerializer(serializers.ModelSerializer):
    tank_fuel_type = serializers.CharField(source="tank.fuel_type", read_only=True)

    class Meta:
        model = Nozzle
        fields = [
            "id",
            "name",
            "station",
            "tank",
            "fuel_type",
            "tank_fuel_type",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ("created_at", "updated_at")

    def validate(self, attrs):
        station = attrs.get("station", getattr(self.instance, "station", None))
        tank = attrs.get("tank", getattr(self.instance, "tank", None))
        fuel_type = attrs.get("fuel_type", getattr(self.instance, "fuel_type", None))

        if tank.station_id != station.id:
            raise serializers.ValidationError(
                {"tank": "Tank belongs to another station."}
            )

        if tank.fuel_type != fuel_type:
            raise serializers.ValidationError(
                {"fuel_type": "Nozzle fuel type must match its tank."}
            )

        return attrs


class StationDetailSerializer(StationSerializer):
    tanks = TankSerializer(many=True, read_only=True)
    nozzles = NozzleSerializer(many=True, read_only=True)

    class Meta(StationSerializer.Meta):
        fields = StationSerializer.Meta.fields + ["tanks", "nozzles"]


class FuelPriceSerializer(serializers.ModelSerializer):
    created_by_employee_id = serializers.CharField(
        source="created_by.employee_id",
        read_only=True,
    )

    class Meta:
        model = FuelPrice
        fields = [
            "id",
            "station",
            "fuel_type",
            "price_per_liter",
            "effective_from",
            "created_by",
            "created_by_employee_id",
            "created_at",
        ]
        read_only_fields = ("created_by", "created_at")
        extra_kwargs = {
            "effective_from": {"required": False},
        }

    def validate_price_per_liter(self, value):
        if value <= 0:
            raise serializers.ValidationError("Price per liter must be positive.")
        return value
