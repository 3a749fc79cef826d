from rest_framework.routers import SimpleRouter

from stations.views import StationViewSet, TankViewSet, NozzleViewSet

# Equipment first: the station detail route would swallow "tanks/".
router = SimpleRouter()
router.register("tanks", TankViewSet, basename="tanks")
router.register("nozzles", NozzleViewSet, basename="nozzles")
router.register("", StationViewSet, basename="stations")

urlpatterns = router.urls
