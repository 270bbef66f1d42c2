"""User Schemas — roster record payloads in the store's camelCase wire format.

Invariants:
    - Every field optional at this layer: missing values become rule messages
      from validate_user, not pydantic 400s (all violations reported together)
    - to_record() emits camelCase keys, dropping id when absent

Design Decisions:
    - snake_case attributes with camelCase aliases; populate_by_name accepts both
"""

from pydantic import BaseModel, ConfigDict, Field


class UserPayload(BaseModel):
    """Create/replace body for a roster record."""
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = None
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    enroll_number: str | None = Field(None, alias="enrollNumber")
    date_of_admission: str | None = Field(None, alias="dateOfAdmission")

    def to_record(self) -> dict:
        record = self.model_dump(by_alias=True)
        if record["id"] is None:
            del record["id"]
        return record


class DeleteResponse(BaseModel):
    deleted: bool
