from __future__ import annotations

import sys
from pathlib import Path

# `streamlit run crud_ui/app.py` puts only crud_ui/ on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import streamlit as st
from dotenv import load_dotenv

from crud_ui.api_client import ResourceClient
from crud_ui.app_pages.filmes import render as render_filmes
from crud_ui.app_pages.users import render as render_users
from crud_ui.config import backend_url

st.set_page_config(page_title="CRUD Usuários e Filmes", layout="wide")

load_dotenv()


def main():
    base_url = backend_url()

    st.markdown("# 🚀 CRUD Usuários e Filmes")
    st.caption(f"Gerenciamento de usuários e filmes consumindo a API em {base_url}")

    tab_users, tab_filmes = st.tabs(["👥 Usuários", "🎬 Filmes"])

    with tab_users:
        render_users(ResourceClient(base_url, "users"))

    with tab_filmes:
        render_filmes(ResourceClient(base_url, "filmes"))


if __name__ == "__main__":
    main()
