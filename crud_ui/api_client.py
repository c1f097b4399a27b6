"""Thin HTTP client for one REST resource (``/users`` or ``/filmes``)."""
from __future__ import annotations

from typing import Any, Optional

import requests

from .config import REQUEST_TIMEOUT

FALLBACK_MESSAGES = {
    "users": {
        "list": "Erro ao carregar usuários",
        "get": "Erro ao carregar usuário",
        "create": "Erro ao criar usuário",
        "update": "Erro ao atualizar usuário",
        "delete": "Erro ao excluir usuário",
    },
    "filmes": {
        "list": "Erro ao carregar filmes",
        "get": "Erro ao carregar filme",
        "create": "Erro ao criar filme",
        "update": "Erro ao atualizar filme",
        "delete": "Erro ao excluir filme",
    },
}


class ApiError(Exception):
    """Failed round trip; ``message`` is safe to show in a banner."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _server_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if isinstance(message, list):
        message = "; ".join(str(m) for m in message)
    return message or None


class ResourceClient:
    def __init__(
        self,
        base_url: str,
        resource: str,
        session: requests.Session | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.resource = resource
        self.session = session or requests.Session()
        self.timeout = timeout

    def _fallback(self, operation: str) -> str:
        return FALLBACK_MESSAGES.get(self.resource, {}).get(operation, "Erro inesperado")

    def _request(self, operation: str, method: str, path: str = "", **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}/{self.resource}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ApiError(f"{self._fallback(operation)}: {exc}") from exc
        if not response.ok:
            raise ApiError(
                _server_message(response) or self._fallback(operation),
                status_code=response.status_code,
            )
        return response

    def list(self, active: Optional[bool] = None) -> list[dict]:
        params = {}
        if active is not None:
            params["active"] = "true" if active else "false"
        return self._request("list", "GET", params=params).json()

    def get(self, entity_id: int) -> dict:
        return self._request("get", "GET", f"/{entity_id}").json()

    def create(self, data: dict) -> dict:
        return self._request("create", "POST", json=data).json()

    def update(self, entity_id: int, data: dict) -> dict:
        return self._request("update", "PATCH", f"/{entity_id}", json=data).json()

    def delete(self, entity_id: int) -> None:
        self._request("delete", "DELETE", f"/{entity_id}")
