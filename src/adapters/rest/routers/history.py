"""Protected history endpoints: list and clear."""

from fastapi import APIRouter, Depends

from factory import ServiceFactory
from domain.models import User
from adapters.rest.dependencies import get_factory, get_current_user

router = APIRouter(prefix="/history", tags=["history"])


@router.get("")
async def get_history(
    user: User = Depends(get_current_user),
    factory: ServiceFactory = Depends(get_factory),
):
    history = await factory.create_ai_gateway().get_history()
    return history.to_dict()


@router.delete("", status_code=204)
async def clear_history(
    user: User = Depends(get_current_user),
    factory: ServiceFactory = Depends(get_factory),
):
    await factory.create_ai_gateway().clear_history()
