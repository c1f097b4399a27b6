"""Widgets shared by the resource pages (alert banners, delete confirmation, list loading)."""
from __future__ import annotations

from typing import Callable

import streamlit as st

from .api_client import ApiError, ResourceClient
from .config import ALERT_REFRESH_SECONDS
from .state import active_alerts, dismiss_alert, push_alert


@st.fragment(run_every=ALERT_REFRESH_SECONDS)
def render_alerts(ui: dict, key: str) -> None:
    """Banners re-render on a timer so expired alerts go away without a click."""
    for alert in active_alerts(ui):
        col_msg, col_close = st.columns([12, 1])
        with col_msg:
            if alert["type"] == "success":
                st.success(alert["message"])
            else:
                st.error(alert["message"])
        with col_close:
            if st.button("×", key=f"{key}_alert_{alert['id']}"):
                dismiss_alert(ui, alert["id"])
                st.rerun(scope="fragment")


def load_items(client: ResourceClient, ui: dict, slot, render: Callable[[], None], **params) -> None:
    """Full reload of the list into ``slot``.

    ``render`` draws the table; it runs once while ``ui["loading"]`` is set (placeholder)
    and once more with the fresh items or ``ui["error"]``.
    """
    ui["loading"] = True
    ui["error"] = ""
    with slot.container():
        render()
    try:
        ui["items"] = client.list(**params)
    except ApiError as exc:
        ui["error"] = exc.message
    finally:
        ui["loading"] = False
    with slot.container():
        render()


def run_mutation(ui: dict, action: Callable[[], object], success_message: str) -> bool:
    try:
        action()
    except ApiError as exc:
        push_alert(ui, exc.message, "error")
        return False
    push_alert(ui, success_message)
    return True


@st.dialog("Confirmar exclusão")
def confirm_delete(client: ResourceClient, ui: dict, entity_id: int, question: str, success_message: str) -> None:
    st.markdown(question)
    col1, col2 = st.columns(2)
    with col1:
        if st.button("🗑️ Excluir", key=f"{client.resource}_confirm_delete_{entity_id}", type="primary", use_container_width=True):
            run_mutation(ui, lambda: client.delete(entity_id), success_message)
            st.rerun()
    with col2:
        if st.button("Cancelar", key=f"{client.resource}_cancel_delete_{entity_id}", use_container_width=True):
            st.rerun()
