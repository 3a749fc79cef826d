from stations.models_shift.shift import Shift  # noqa: F401
from stations.models_shift.reading import NozzleReading  # noqa: F401
from stations.models_shift.sale import NozzleSale  # noqa: F401
