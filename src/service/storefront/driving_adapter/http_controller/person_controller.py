from fastapi import APIRouter, Depends

from src.platform.logging.loguru_io import Logger
from src.service.storefront.app.query.get_person_use_case import GetPersonUseCase
from src.service.storefront.driving_adapter.http_controller.xml_response import (
    XMLResponse,
    render_xml,
)


router = APIRouter()


@router.get('', response_class=XMLResponse)
@Logger.io
async def get_person(
    use_case: GetPersonUseCase = Depends(GetPersonUseCase.depends),
) -> XMLResponse:
    person = use_case.get_person()
    return XMLResponse(content=render_xml('person', person))
