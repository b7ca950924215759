
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from docvault.models.document import TITLE_MAX_LENGTH, CONTENT_MAX_LENGTH

class DocumentCreate(BaseModel):
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field("", max_length=CONTENT_MAX_LENGTH)

class DocumentUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(max_length=CONTENT_MAX_LENGTH)

class DocumentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    content: str
    owner_id: int
    created_at: datetime
    updated_at: datetime

class MessageOut(BaseModel):
    message: str
