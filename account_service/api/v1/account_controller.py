# External package imports
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import UserResponse, UserUpdateRequest, MessageResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.user.get_user_profile import GetUserProfileUseCase
from ...application.use_cases.user.update_user_profile import UpdateUserProfileUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["accounts"])

_error_responses = {
    400: {"model": MessageResponse},
    401: {"model": MessageResponse},
    404: {"model": MessageResponse},
}


@router.get("/app", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness check"""
    return "API is running"


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_error_responses,
)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with the created user and a bearer token
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse, responses=_error_responses)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Args:
        request: User login request

    Returns:
        AuthResponse with the user and a bearer token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/view", response_model=UserResponse, responses=_error_responses)
async def view_user(current_user: UserResponse = Depends(get_current_user)) -> UserResponse:
    """Return the authenticated user's profile"""
    container = get_container()
    get_profile_use_case = container.get(GetUserProfileUseCase)
    return await get_profile_use_case.execute(current_user.id)


@router.post("/edit", response_model=UserResponse, responses=_error_responses)
async def edit_user(
    request: UserUpdateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> UserResponse:
    """
    Update the authenticated user's profile

    Args:
        request: Fields to change (all optional)
        current_user: Current authenticated user (from dependency)

    Returns:
        UserResponse with the updated profile
    """
    container = get_container()
    update_use_case = container.get(UpdateUserProfileUseCase)
    return await update_use_case.execute(current_user.id, request)


@router.delete("/delete", response_model=MessageResponse, responses=_error_responses)
async def delete_user(current_user: UserResponse = Depends(get_current_user)) -> MessageResponse:
    """Remove the authenticated user's account"""
    container = get_container()
    delete_use_case = container.get(DeleteUserUseCase)
    return await delete_use_case.execute(current_user.id)
