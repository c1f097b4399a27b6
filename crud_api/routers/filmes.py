from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from crud_api.schemas.filmes import FilmeCreate, FilmeRead, FilmeUpdate
from crud_api.services.filme_service import FilmeService

router = APIRouter(prefix="/filmes", tags=["filmes"])


def _get_filme_service(request: Request) -> FilmeService:
    svc = getattr(getattr(request.app, "state", None), "filme_service", None)
    if not svc:
        raise RuntimeError("FilmeService nao configurado")
    return svc


@router.post("", response_model=FilmeRead, status_code=status.HTTP_201_CREATED)
def create_filme(payload: FilmeCreate, svc: FilmeService = Depends(_get_filme_service)):
    return svc.create(payload)


@router.get("", response_model=list[FilmeRead])
def list_filmes(svc: FilmeService = Depends(_get_filme_service)):
    return svc.find_all()


@router.get("/{filme_id}", response_model=FilmeRead)
def get_filme(filme_id: int, svc: FilmeService = Depends(_get_filme_service)):
    return svc.find_one(filme_id)


@router.patch("/{filme_id}", response_model=FilmeRead)
def update_filme(filme_id: int, payload: FilmeUpdate, svc: FilmeService = Depends(_get_filme_service)):
    return svc.update(filme_id, payload)


@router.delete("/{filme_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_filme(filme_id: int, svc: FilmeService = Depends(_get_filme_service)):
    svc.remove(filme_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
