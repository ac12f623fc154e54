from datetime import datetime
from typing import Optional

import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Product {attribute.name} cannot be empty')


@attrs.define
class ProductEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
