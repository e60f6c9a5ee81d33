# backend/models/property_models.py

from pydantic import BaseModel, ConfigDict

# Column order of the upload CSV. Parsing is positional, so this order is the contract.
PROPERTY_FIELDS = (
    "prefecture",
    "city",
    "town",
    "chome",
    "banchi",
    "go",
    "building",
    "price",
    "nearest_station",
    "property_type",
    "land_area",
)

# The subset of fields that make up the rendered full address.
ADDRESS_FIELDS = PROPERTY_FIELDS[:7]


class Property(BaseModel):
    """
    One parsed real-estate listing.
    Every field is the raw CSV cell text, untouched.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    prefecture: str
    city: str
    town: str
    chome: str
    banchi: str
    go: str
    building: str
    price: str
    nearest_station: str
    property_type: str
    land_area: str


class PropertyView(BaseModel):
    id: int
    full_address: str
    prefecture: str
    city: str
    town: str
    chome: str
    banchi: str
    go: str
    building: str
    price: str
    nearest_station: str
    property_type: str
    land_area: str
