"""Question bank routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from vouch.application.usecase.question import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from vouch.domain.value import DomainType

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


@router.get("/{domain}", response_model=ListQuestionsResponse)
async def list_questions(
    domain: DomainType,
    use_case: FromDishka[ListQuestionsUseCase],
) -> ListQuestionsResponse:
    """Active questions of a domain with their answer options."""
    return await use_case.execute(ListQuestionsRequest(domain=domain))
