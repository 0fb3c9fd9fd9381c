from pydantic import BaseModel


class TokenPayload(BaseModel):
    sub: str  # user id
    admission_number: str
    exp: int
