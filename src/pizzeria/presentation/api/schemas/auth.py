"""Authentication schemas for request/response models.

All payloads use camelCase field names on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(CamelModel):
    message: str


class StatusResponse(CamelModel):
    """Response schema for the session status check."""

    logged_in: bool
    user_id: int | None = None
    role: str | None = None
    email: str | None = None
    message: str


class IdentifyRequest(CamelModel):
    """Request schema for choosing a sign-in form."""

    email: str | None = Field(default=None, description="Login identifier")

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "jane@gmail.com"}},
    )


class IdentifyResponse(CamelModel):
    login_type: str = Field(..., description="CUSTOMER or WORKER")


class SignInRequest(CamelModel):
    """Request schema for customer and worker sign-in."""

    username: str = ""
    password: str = ""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jane@gmail.com",
                "password": "Pizza123!",
            },
        },
    )


class UserResponse(CamelModel):
    """Sanitized principal returned after sign-in."""

    id: int
    email: str
    first_name: str
    last_name: str
    role: str


class SignInResponse(CamelModel):
    message: str
    user: UserResponse


class RegisterRequest(CamelModel):
    """Request schema for customer self-registration."""

    first_name: str
    last_name: str
    phone: str = ""
    address1: str
    address2: str = ""
    city: str = ""
    state: str = ""
    # Kept as text so leading zeros survive
    zip: str = ""
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Jane",
                "lastName": "Doe",
                "phone": "555-0100",
                "address1": "1 Main St",
                "address2": "",
                "city": "Springfield",
                "state": "IL",
                "zip": "01234",
                "email": "jane@gmail.com",
                "password": "Pizza123!",
            },
        },
    )


class RegisteredUserResponse(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str


class RegisterResponse(CamelModel):
    message: str
    user: RegisteredUserResponse
