from accounts.serializers.user import UserSerializer, MeSerializer  # noqa: F401
