from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class ReviewEntity:
    # content is free text: nullable, no length or format rule
    product_id: int
    content: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
