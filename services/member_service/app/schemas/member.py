from pydantic import BaseModel, ConfigDict


class MemberBase(BaseModel):
    name: str


class MemberCreate(MemberBase):
    pass


class MemberResponse(MemberBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
