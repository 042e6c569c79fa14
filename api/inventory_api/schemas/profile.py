from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


def _camel(field: str, camel: str):
    return Field(validation_alias=AliasChoices(camel, field), serialization_alias=camel)


class ProfileBase(BaseModel):
    first_name: str = _camel("first_name", "firstName")
    last_name: str = _camel("last_name", "lastName")
    gender: str
    address: str

class ProfileCreate(ProfileBase):
    profile_image: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("profileImage", "profile_image"),
        serialization_alias="profileImage",
    )

class ProfileRead(ProfileCreate):
    id: str

    class Config:
        from_attributes = True
