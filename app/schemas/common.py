# Shared request/response building blocks (camelCase on the wire)

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase in JSON. Either spelling is accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class UserSchema(CamelModel):
    """Self-asserted profile. uuid is whatever the client says it is."""

    uuid: str = ""
    name: str = ""
    phone: Optional[str] = None
    license_plate: Optional[str] = None
    emergency_contact: Optional[str] = None
