# accounts/serializers/user.py
from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password

from accounts.constants import UserRole, StationRoles
from stations.models import Station

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    # 🔹 Station (business key)
    station = serializers.PrimaryKeyRelatedField(
        queryset=Station.objects.all(),
        required=False,
        allow_null=True
    )

    area_manager = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.filter(role=UserRole.AREA_MANAGER),
        required=False,
        allow_null=True
    )

    # 🔹 Password (always hashed)
    password = serializers.CharField(
        write_only=True,
        required=False,
        style={"input_type": "password"},
    )

    class Meta:
        model = User
        fields = [
            "id",
            "employee_id",
            "username",
            "email",
            "first_name",
            "last_name",
            "role",
            "station",
            "area_manager",
            "password",
            "is_active",
            "date_joined",
        ]
        read_only_fields = ["id", "date_joined"]

    # ------------------------------------------------------------------
    # ROLE RULES
    # ------------------------------------------------------------------
    def validate(self, attrs):
        role = attrs.get("role") or getattr(self.instance, "role", None)
        station = attrs.get("station", getattr(self.instance, "station", None))
        area_manager = attrs.get(
            "area_manager", getattr(self.instance, "area_manager", None)
        )

        if role in StationRoles.ATTACHED and station is None:
            raise serializers.ValidationError(
                {"station": "A station manager must be attached to a station."}
            )

        if area_manager is not None and role != UserRole.STATION_MANAGER:
            raise serializers.ValidationError(
                {"area_manager": "Only station managers report to an area manager."}
            )

        if self.instance is None and not attrs.get("password"):
            raise serializers.ValidationError(
                {"password": "Password is required."}
            )

        password = attrs.get("password")
        if password:
            validate_password(password)

        return attrs

    def create(self, validated_data):
        password = validated_data.pop("password")

        user = User(**validated_data)
        user.set_password(password)
        user.save()

        return user

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)

        if password:
            instance.set_password(password)

        instance.save()
        return instance


class MeSerializer(serializers.ModelSerializer):
    """
    Light serializer for /auth/me/: identity, role and assignments used by
    the front end.
    """

    station_name = serializers.CharField(source="station.name", read_only=True, default=None)

    class Meta:
        model = User
        fields = (
            "id",
            "employee_id",
            "username",
            "email",
            "first_name",
            "last_name",
            "role",
            "station",
            "station_name",
            "area_manager",
            "is_superuser",
        )
        read_only_fields = fields
