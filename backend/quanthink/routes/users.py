"""
QuanThink Backend: User Route Handlers
=======================================

What:  User CRUD under /users plus POST /login.
How:   Handlers delegate to UserService. Domain errors raised there
       (DuplicateEmailError, UserNotFoundError, WrongPasswordError) are
       rendered as plain-text 400/401 responses by the global handlers.

Status Codes:
    GET    /users        200 list | 404 when no user exists
    GET    /users/{id}   200 | 404
    POST   /users        201 | 400 "Email already exists" | 500
    POST   /login        200 | 401 "User not found" | 401 "Wrong password"
    PUT    /users/{id}   200 | 404 | 400 "Email already exists"
    DELETE /users/{id}   204 | 500
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from quanthink.dependencies import get_user_service
from quanthink.exceptions import NotFoundError
from quanthink.schemas.user import LoginRequest, UserCreate, UserResponse, UserUpdate
from quanthink.services.user_service import UserService

router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses={
        200: {"description": "Registered users"},
        404: {"description": "No users registered"},
    },
    summary="Get all users",
    description="Retrieves a list of all users.",
)
async def get_all_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    users = await service.get_all_users()
    if not users:
        raise NotFoundError(resource="user")
    return users


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        200: {"description": "User found"},
        404: {"description": "User not found"},
    },
    summary="Get user by ID",
    description="Retrieves a user by ID.",
)
async def get_user_by_id(
    user_id: int = Path(description="User ID"),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise NotFoundError(resource="user", resource_id=user_id)
    return user


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User created"},
        400: {"description": "Email already exists"},
        500: {"description": "Internal server error"},
    },
    summary="Create user",
    description="Creates a new user.",
)
async def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.create_user(user)


@router.post(
    "/login",
    response_model=UserResponse,
    responses={
        200: {"description": "User authenticated"},
        401: {"description": "Unauthorized"},
    },
    summary="Login user",
    description="Authenticates a user.",
)
async def login_user(
    credentials: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """No token is issued; the client keeps the returned user record."""
    return await service.authenticate(credentials.email, credentials.password)


@router.put(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={
        200: {"description": "User updated"},
        400: {"description": "Email already exists"},
        404: {"description": "User not found"},
    },
    summary="Update user",
    description="Updates a user.",
)
async def update_user(
    user: UserUpdate,
    user_id: int = Path(description="User ID"),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    updated = await service.update_user(user_id, user)
    if updated is None:
        raise NotFoundError(resource="user", resource_id=user_id)
    return updated


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        204: {"description": "User deleted"},
        500: {"description": "Internal server error"},
    },
    summary="Delete user",
    description="Deletes a user by ID.",
)
async def delete_user(
    user_id: int = Path(description="User ID"),
    service: UserService = Depends(get_user_service),
) -> Response:
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
