"""
Authentication API endpoints.

Registration and login for each principal kind:
    POST /auth/{customer,staff,admin}/register
    POST /auth/{customer,staff,admin}/login
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from shared.models import Role

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post("/{role}/register", response_model=AuthResponse, status_code=201)
async def register(
    role: Role,
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a new principal of the given kind and return a session token.

    Address and phone are stored for customers only.
    """
    return await service.register(role, request)


@router.post("/{role}/login", response_model=AuthResponse)
async def login(
    role: Role,
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Authenticate a principal of the given kind and return a fresh token.

    Unknown email and wrong password fail identically with 400.
    """
    return await service.login(role, request)
