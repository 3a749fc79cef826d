from .shift import ShiftSerializer, ShiftCreateSerializer, ShiftDetailSerializer  # noqa
from .reading import (  # noqa
    NozzleReadingSerializer,
    ReadingsSubmitSerializer,
    ReadingUpdateSerializer,
)
from .sale import (  # noqa
    NozzleSaleSerializer,
    NozzleSaleUpdateSerializer,
    ShiftPaymentsSerializer,
)
