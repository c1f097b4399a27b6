"""Ephemeral per-resource UI state kept in ``st.session_state``."""
from __future__ import annotations

import itertools
import time
from typing import MutableMapping, Optional

import streamlit as st

from .config import ALERT_TTL_SECONDS

_alert_ids = itertools.count(1)


def init(resource: str, state: Optional[MutableMapping] = None) -> dict:
    """Return (creating on first use) the state dict for ``resource``."""
    store = st.session_state if state is None else state
    key = f"{resource}_ui"
    if key not in store:
        store[key] = {
            "items": [],
            "loading": False,
            "error": "",
            "editing": None,
            "filter": None,
            "alerts": [],
        }
    return store[key]


def push_alert(ui: dict, message: str, kind: str = "success", now: float | None = None) -> dict:
    alert = {
        "id": next(_alert_ids),
        "message": message,
        "type": kind,
        "created": time.time() if now is None else now,
    }
    ui["alerts"].append(alert)
    return alert


def dismiss_alert(ui: dict, alert_id: int) -> None:
    ui["alerts"] = [a for a in ui["alerts"] if a["id"] != alert_id]


def active_alerts(ui: dict, now: float | None = None, ttl: float = ALERT_TTL_SECONDS) -> list[dict]:
    """Drop alerts older than ``ttl`` seconds and return the remaining ones."""
    current = time.time() if now is None else now
    ui["alerts"] = [a for a in ui["alerts"] if current - a["created"] < ttl]
    return list(ui["alerts"])
