# petrostation/urls.py
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from accounts.urls import auth_urlpatterns

urlpatterns = [
    path("api/v1/auth/", include(auth_urlpatterns)),
    path("api/v1/", include("accounts.urls")),

    path("api/v1/stations/", include("stations.urls")),
    path("api/v1/inventory/", include("stations.urls_inventory")),
    path("api/v1/fuel/", include("stations.urls_fuel")),
    path("api/v1/cash/", include("cash.urls")),

    path("api/v1/schema/", SpectacularAPIView.as_view(), name="openapi-schema"),
    path(
        "api/v1/docs/",
        SpectacularSwaggerView.as_view(url_name="openapi-schema"),
        name="swagger-ui",
    ),

    path("admin/", admin.site.urls),
]
