from fastapi import APIRouter, Depends, HTTPException, status

from app.core.dependencies import get_current_user, get_user_repository
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.services.auth_service import auth_service
from app.schemas.auth import UserLogin, UserRegister, AuthResponse, RefreshTokenRequest
from app.schemas.user import UserRead

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=AuthResponse)
async def login(user: UserLogin, repo: UserRepository = Depends(get_user_repository)):
    """Аутентификация пользователя и выдача JWT токенов"""
    authenticated_user = await auth_service.authenticate_user(repo, user)
    if not authenticated_user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid login or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return AuthResponse(**await auth_service.issue_tokens(repo, authenticated_user))


@router.post("/register", response_model=AuthResponse)
async def register(user: UserRegister, repo: UserRepository = Depends(get_user_repository)):
    """Регистрация нового пользователя и выдача JWT токенов"""
    new_user = await auth_service.register_user(repo, user)
    return AuthResponse(**await auth_service.issue_tokens(repo, new_user))


@router.post("/refresh", response_model=AuthResponse)
async def refresh_token(request: RefreshTokenRequest, repo: UserRepository = Depends(get_user_repository)):
    """Ротация refresh-токена: старый токен становится недействительным"""
    user = await auth_service.rotate_refresh_token(repo, request.refresh_token)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token"
        )

    return AuthResponse(**await auth_service.issue_tokens(repo, user))


@router.post("/logout", status_code=204)
async def logout(request: RefreshTokenRequest, repo: UserRepository = Depends(get_user_repository)):
    """Аннулировать refresh-токен. Ответ 204 независимо от валидности токена"""
    await auth_service.logout_user(repo, request.refresh_token)


@router.get("/me", response_model=UserRead)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
