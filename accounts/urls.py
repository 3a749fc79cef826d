from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import TokenRefreshView

from accounts.token import StationTokenObtainPairView
from accounts.views import UserViewSet, MeView

router = DefaultRouter()
router.register(r"users", UserViewSet, basename="users")

auth_urlpatterns = [
    path("login/", StationTokenObtainPairView.as_view(), name="auth-login"),
    path("refresh/", TokenRefreshView.as_view(), name="auth-refresh"),
    path("me/", MeView.as_view(), name="auth-me"),
]

urlpatterns = router.urls
