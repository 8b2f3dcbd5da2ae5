"""Auth endpoints: register, login, simulated Google sign-in, session, logout."""

from fastapi import APIRouter, Depends, HTTPException, status

from factory import ServiceFactory
from domain.exceptions import AccountNotFoundError, AuthenticationError, DuplicateAccountError
from domain.models import User
from application.dto import RegisterRequest, LoginRequest
from adapters.rest.dependencies import get_factory, get_current_user
from adapters.rest.schemas import RegisterBody, LoginBody, UserOut

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_out(user: User) -> UserOut:
    return UserOut(name=user.name, email=user.email)


@router.post("/register", response_model=UserOut, status_code=201)
async def register(
    body: RegisterBody,
    factory: ServiceFactory = Depends(get_factory),
):
    auth_service = factory.create_authentication_service()
    try:
        user = await auth_service.register(RegisterRequest(
            name=body.name,
            email=body.email,
            password=body.password,
        ))
    except DuplicateAccountError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return _user_out(factory.session.start(user))


@router.post("/login", response_model=UserOut)
async def login(
    body: LoginBody,
    factory: ServiceFactory = Depends(get_factory),
):
    auth_service = factory.create_authentication_service()
    try:
        user = await auth_service.login(LoginRequest(
            email=body.email,
            password=body.password,
        ))
    except AccountNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return _user_out(factory.session.start(user))


@router.post("/google", response_model=UserOut)
async def google_login(factory: ServiceFactory = Depends(get_factory)):
    user = await factory.create_authentication_service().google_login()
    return _user_out(factory.session.start(user))


@router.get("/session", response_model=UserOut)
async def current_session(user: User = Depends(get_current_user)):
    return _user_out(user)


@router.post("/logout", status_code=204)
async def logout(factory: ServiceFactory = Depends(get_factory)):
    """Sign out and clear the history."""
    await factory.session.logout()
