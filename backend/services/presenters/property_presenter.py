from typing import Iterable, List, Literal

from models.property_models import ADDRESS_FIELDS, Property, PropertyView

AddressFormat = Literal["bare", "marked"]

# Formal markers appended after chome / banchi / go in the "marked" format.
CHOME_MARKER = "丁目"
BANCHI_MARKER = "番地"
GO_MARKER = "号"


# ============================================================
#  FULL ADDRESS
# ============================================================

def format_full_address(prop: Property, address_format: AddressFormat = "bare") -> str:
    """
    Build the display address from the seven address components.
    - bare:   prefecture + city + town + chome + banchi + go + building
    - marked: same, with 丁目 / 番地 / 号 after chome / banchi / go
    Computed on every render, never stored.
    """
    if address_format == "marked":
        return (
            f"{prop.prefecture}{prop.city}{prop.town}"
            f"{prop.chome}{CHOME_MARKER}"
            f"{prop.banchi}{BANCHI_MARKER}"
            f"{prop.go}{GO_MARKER}"
            f"{prop.building}"
        )

    if address_format != "bare":
        raise ValueError(f"Unknown address format: {address_format}")

    return "".join(getattr(prop, f) for f in ADDRESS_FIELDS)


# ============================================================
#  VIEWS
# ============================================================

def present_property(prop: Property, address_format: AddressFormat = "bare") -> PropertyView:
    return PropertyView(
        full_address=format_full_address(prop, address_format),
        **prop.model_dump(),
    )


def present_properties(
    props: Iterable[Property],
    address_format: AddressFormat = "bare",
) -> List[PropertyView]:
    return [present_property(p, address_format) for p in props]
