from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)

    model_config = ConfigDict(json_schema_extra={'example': {'name': 'Walnut Desk Organizer'}})


class ProductResponse(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime
