from typing import Optional

from fastapi import APIRouter, Depends

from src.platform.constant.route_constant import USER_GET
from src.platform.database.orm_db_setting import MAX_INTEGER_ID
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.query.get_user_use_case import GetUserUseCase
from src.service.storefront.driving_adapter.http_controller.schema.user_schema import UserResponse


router = APIRouter()


def _parse_user_id(raw_user_id: str) -> Optional[int]:
    # Only plain ASCII digits name a user; '+1', ' 1' and '1_0' do not
    if not (raw_user_id.isascii() and raw_user_id.isdigit()):
        return None
    if len(raw_user_id.lstrip('0')) > len(str(MAX_INTEGER_ID)):
        return None
    return int(raw_user_id)


@router.get('/{user_id}', response_model=UserResponse)
@Logger.io
async def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(GetUserUseCase.depends),
) -> UserResponse:
    parsed_user_id = _parse_user_id(user_id)
    user = None if parsed_user_id is None else await use_case.get_by_id(user_id=parsed_user_id)
    if user is None or user.id is None:
        raise NotFoundError(f'User not found: {user_id}')

    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created_at=user.created_at,  # type: ignore[arg-type]
        updated_at=user.updated_at,  # type: ignore[arg-type]
        url=USER_GET.format(user_id=user.id),
    )
