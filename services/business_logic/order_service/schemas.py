# services/business_logic/order_service/schemas.py
# Document shapes for the three collections.
# Schema-on-write: fields are coerced (not validated), unknown keys dropped,
# nothing is required.

from typing import Annotated, ClassVar, List, Optional, Tuple, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _blank_to_none(value):
    # Blank form inputs are stored as null
    return None if value == "" else value


def _fit_int64(value):
    # BSON has no integer wider than 64 bits; store those as doubles
    if isinstance(value, int) and not INT64_MIN <= value <= INT64_MAX:
        try:
            return float(value)
        except OverflowError:
            raise ValueError("number is too large to store")
    return value


# int first so 2 stays 2 and "2" becomes 2; "2.5" falls through to float
Number = Annotated[
    Optional[Union[int, float]],
    BeforeValidator(_blank_to_none),
    AfterValidator(_fit_int64),
]


class Document(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    # List fields stored as [] when the client leaves them out
    list_fields: ClassVar[Tuple[str, ...]] = ()

    def to_document(self) -> dict:
        doc = self.model_dump(exclude_unset=True)
        for name in self.list_fields:
            doc.setdefault(name, [])
        return doc


class Address(Document):
    flat_no: Optional[str] = None
    area:    Optional[str] = None
    city:    Optional[str] = None
    state:   Optional[str] = None
    pincode: Optional[str] = None


class Vegetables(Document):
    brinjalQty:      Optional[Number] = None
    tomatoQty:       Optional[Number] = None
    carrotQty:       Optional[Number] = None
    cucumberQty:     Optional[Number] = None
    onionQty:        Optional[Number] = None
    chilliQty:       Optional[Number] = None
    spinachQuantity: Optional[Number] = None
    coriander:       Optional[Number] = None
    Karvepaku:       Optional[Number] = None
    pudina:          Optional[Number] = None


class LineItem(Document):
    name:      Optional[str]    = None
    quantity:  Optional[Number] = None
    totalCost: Optional[Number] = None


class Customer(Document):
    name:    Optional[str]     = None
    email:   Optional[str]     = None
    phone:   Optional[str]     = None
    address: Optional[Address] = None


# ── Collections ───────────────────────────────────────────────────────────────

class Order(Document):
    name:       Optional[str]        = None
    email:      Optional[str]        = None
    phone:      Optional[str]        = None
    address:    Optional[Address]    = None
    vegetables: Optional[Vegetables] = None
    totalCost:  Optional[Number]     = None


class Cart(Document):
    list_fields: ClassVar[Tuple[str, ...]] = ("items",)

    items:         Optional[List[LineItem]] = None
    totalCartCost: Optional[Number]         = None


class Checkout(Document):
    list_fields: ClassVar[Tuple[str, ...]] = ("cart",)

    customer:  Optional[Customer]       = None
    cart:      Optional[List[LineItem]] = None
    cartTotal: Optional[Number]         = None
