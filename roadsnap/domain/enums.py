"""Domain enumerations."""

import enum


class AddressComponentType(str, enum.Enum):
    """Subset of the provider's address component type tags we read."""

    ROUTE = "route"
    STREET_ADDRESS = "street_address"


class DistanceUnit(str, enum.Enum):
    METERS = "meters"
