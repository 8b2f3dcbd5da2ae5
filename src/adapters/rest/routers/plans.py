"""Protected personalized plan endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from factory import ServiceFactory
from domain.exceptions import GenerationError, PlanValidationError
from domain.models import User
from application.contracts import PersonalizedPlanOut
from application.validation import build_metrics
from adapters.rest.dependencies import get_factory, get_current_user
from adapters.rest.schemas import PlanBody

router = APIRouter(prefix="/plans", tags=["plans"])


@router.post("", response_model=PersonalizedPlanOut)
async def generate_plan(
    body: PlanBody,
    user: User = Depends(get_current_user),
    factory: ServiceFactory = Depends(get_factory),
):
    try:
        metrics = build_metrics(body.metric_fields(), body.goal)
    except PlanValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"errors": exc.errors},
        )

    gateway = factory.create_ai_gateway()
    try:
        plan = await gateway.generate_personalized_plan(metrics, body.goal)
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return plan.to_dict()
