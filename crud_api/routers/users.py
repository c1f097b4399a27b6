from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Request, Response, status

from crud_api.schemas.users import UserCreate, UserRead, UserUpdate
from crud_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService nao configurado")
    return svc


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, svc: UserService = Depends(_get_user_service)):
    return svc.create(payload)


@router.get("", response_model=list[UserRead])
def list_users(active: Optional[bool] = None, svc: UserService = Depends(_get_user_service)):
    """Todos os usuarios, mais recentes primeiro; ``?active=true|false`` filtra pelo status."""
    return svc.find_all(active=active)


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: int, svc: UserService = Depends(_get_user_service)):
    return svc.find_one(user_id)


@router.patch("/{user_id}", response_model=UserRead)
def update_user(user_id: int, payload: UserUpdate, svc: UserService = Depends(_get_user_service)):
    return svc.update(user_id, payload)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, svc: UserService = Depends(_get_user_service)):
    svc.remove(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
