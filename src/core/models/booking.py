from pydantic import BaseModel, ConfigDict, Field

from core.models.fields import Scalar, TruthyScalar
from core.models.user import User


class CreateBookingRequest(BaseModel):
    """Body of POST /bookings.

    The two references are DynamoDB key attributes, so they must be strings.
    The remaining fields accept any truthy JSON scalar, e.g. ISO dates or
    epoch milliseconds for CheckIn/CheckOut.
    """

    model_config = ConfigDict(populate_by_name=True)

    place_id: str = Field(..., alias="placeId", min_length=1)
    user_id: str = Field(..., alias="userId", min_length=1)
    check_in: TruthyScalar = Field(..., alias="CheckIn")
    check_out: TruthyScalar = Field(..., alias="CheckOut")
    party_type: TruthyScalar = Field(..., alias="PartyType")


class Booking(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(..., alias="bookingId")
    place_id: str = Field(..., alias="placeId")
    user_id: str = Field(..., alias="userId")
    check_in: Scalar = Field(..., alias="CheckIn")
    check_out: Scalar = Field(..., alias="CheckOut")
    party_type: Scalar = Field(..., alias="PartyType")


class ExpandedBooking(BaseModel):
    """A booking whose user reference has been replaced by the user record.

    ``user`` is None when the referenced user does not exist.
    """

    model_config = ConfigDict(populate_by_name=True)

    booking_id: str = Field(..., alias="bookingId")
    place_id: str = Field(..., alias="placeId")
    user: User | None = Field(None, alias="userId")
    check_in: Scalar = Field(..., alias="CheckIn")
    check_out: Scalar = Field(..., alias="CheckOut")
    party_type: Scalar = Field(..., alias="PartyType")
