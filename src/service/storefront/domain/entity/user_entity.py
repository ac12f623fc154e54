from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class UserEntity:
    name: str
    email: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
