from pydantic import BaseModel, Field


class UnitCreate(BaseModel):
    unit_code: str = Field(min_length=1, max_length=32)
    name: str = Field(min_length=1)
    description: str | None = None
    category: str = Field(min_length=1)


class UnitResponse(BaseModel):
    id: str
    unit_code: str
    name: str
    description: str | None
    category: str

    class Config:
        from_attributes = True
