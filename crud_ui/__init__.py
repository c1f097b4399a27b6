"""Streamlit front-end for the CRUD API (users and filmes)."""
