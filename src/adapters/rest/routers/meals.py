"""Protected meal image analysis endpoint (file upload)."""

import base64

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from factory import ServiceFactory
from domain.exceptions import GenerationError
from domain.models import User
from application.contracts import NutritionalInfoOut
from adapters.rest.dependencies import get_factory, get_current_user

router = APIRouter(prefix="/meals", tags=["meals"])


@router.post("/analyze", response_model=NutritionalInfoOut)
async def analyze_meal(
    file: UploadFile = File(...),
    user: User = Depends(get_current_user),
    factory: ServiceFactory = Depends(get_factory),
):
    image_base64 = base64.b64encode(await file.read()).decode()
    mime_type = file.content_type or "image/jpeg"

    gateway = factory.create_ai_gateway()
    try:
        analysis = await gateway.analyze_meal_image(image_base64, mime_type)
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    return analysis.to_dict()
