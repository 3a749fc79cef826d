from rest_framework.exceptions import PermissionDenied

from accounts.constants import UserRole
from stations.models import Station


def can_access_station(user, station_id):
    """
    SM: own station only. AM: the stations they manage. ADMIN: any station.
    """
    if user.is_admin_role:
        return True

    if user.role == UserRole.STATION_MANAGER:
        return str(user.station_id) == str(station_id)

    if user.role == UserRole.AREA_MANAGER:
        return Station.objects.filter(id=station_id, area_manager=user).exists()

    return False


def ensure_station_access(user, station_id):
    if not can_access_station(user, station_id):
        raise PermissionDenied("You can only act on your own station.")
