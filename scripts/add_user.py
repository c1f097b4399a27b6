#!/usr/bin/env python3
"""
Cadastrar um usuario diretamente no banco (mesmas regras de validacao da API).

Uso:
  python scripts/add_user.py --name "Ana" --email ana@exemplo.com [--age 30] [--inactive]
"""
from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from crud_api.core.config import get_settings
from crud_api.core.logging import configure_logging
from crud_api.db.migrations import run_migrations
from crud_api.db.session import get_engine
from crud_api.schemas.users import UserCreate
from crud_api.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario no banco")
    ap.add_argument("--name", required=True, help="Nome completo")
    ap.add_argument("--email", required=True, help="E-mail valido")
    ap.add_argument("--age", type=int, help="Idade (1-120)")
    ap.add_argument("--inactive", action="store_true", help="Cadastrar como inativo")
    args = ap.parse_args()

    configure_logging(get_settings().log_level)
    run_migrations(get_engine())

    try:
        payload = UserCreate.model_validate(
            {"name": args.name, "email": args.email, "age": args.age, "isActive": not args.inactive}
        )
    except ValidationError as exc:
        raise SystemExit(f"Dados invalidos: {exc}") from exc

    user = UserService().create(payload)
    print("OK: usuario cadastrado")
    print(f"  ID: {user.id}")
    print(f"  Nome: {user.name}")
    print(f"  E-mail: {user.email}")
    print(f"  Status: {'ativo' if user.is_active else 'inativo'}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
