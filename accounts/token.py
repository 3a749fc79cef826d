# accounts/token.py
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer
from rest_framework_simplejwt.views import TokenObtainPairView


class StationTokenObtainPairSerializer(TokenObtainPairSerializer):
    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        # custom claims
        token['role'] = user.role
        token['employee_id'] = user.employee_id
        token['station_id'] = str(user.station_id) if user.station_id else None
        return token


class StationTokenObtainPairView(TokenObtainPairView):
    serializer_class = StationTokenObtainPairSerializer
