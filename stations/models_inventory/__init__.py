from stations.models_inventory.tank import Tank  # noqa: F401
from stations.models_inventory.nozzle import Nozzle  # noqa: F401
from stations.models_inventory.delivery import TankerDelivery  # noqa: F401
