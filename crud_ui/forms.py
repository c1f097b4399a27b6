"""Conversions between form widgets and API payloads."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


def _optional_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("Idade deve ser um número inteiro") from exc


def user_form_defaults(editing: Optional[dict]) -> dict:
    if not editing:
        return {"name": "", "email": "", "age": None, "isActive": True}
    return {
        "name": editing.get("name") or "",
        "email": editing.get("email") or "",
        "age": editing.get("age"),
        "isActive": bool(editing.get("isActive", True)),
    }


def user_payload(name: str, email: str, age: Any, is_active: bool) -> dict:
    # empty age is sent as null, never as NaN or ""
    return {
        "name": (name or "").strip(),
        "email": (email or "").strip(),
        "age": _optional_int(age),
        "isActive": bool(is_active),
    }


def filme_form_defaults(editing: Optional[dict]) -> dict:
    if not editing:
        return {"nome": "", "descricao": "", "genero": "", "duracao": None, "anolancamento": None}
    return {key: editing.get(key) for key in ("nome", "descricao", "genero", "duracao", "anolancamento")}


def filme_payload(nome: str, descricao: str, genero: str, duracao: Any, anolancamento: Any) -> dict:
    return {
        "nome": (nome or "").strip(),
        "descricao": (descricao or "").strip(),
        "genero": (genero or "").strip(),
        "duracao": None if duracao is None else int(duracao),
        "anolancamento": None if anolancamento is None else int(anolancamento),
    }


def format_date(value: Optional[str]) -> str:
    """ISO timestamp -> dd/mm/yyyy (pt-BR); '-' when missing or unparseable."""
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%d/%m/%Y")
    except ValueError:
        return "-"
