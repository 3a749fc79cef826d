from .delivery import TankerDeliverySerializer, TankerDeliveryCreateSerializer  # noqa
