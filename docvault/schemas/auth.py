
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 6

class RegisterIn(BaseModel):
    username: str = Field(min_length=USERNAME_MIN_LENGTH, max_length=255)
    password: str = Field(min_length=PASSWORD_MIN_LENGTH)

class LoginIn(BaseModel):
    username: str
    password: str

class AuthOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    user_id: int
