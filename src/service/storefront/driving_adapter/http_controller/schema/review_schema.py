from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ReviewCreateRequest(BaseModel):
    content: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={'example': {'content': 'Sturdy, and the finish is lovely.'}}
    )


class ReviewResponse(BaseModel):
    id: int
    product_id: int
    content: Optional[str]
    created_at: datetime
    updated_at: datetime
