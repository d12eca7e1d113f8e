"""Runtime settings for the dashboard core.

Values are read from Streamlit secrets (section ``[pressy]`` in
``.streamlit/secrets.toml``), then from environment variables, then fall
back to local development defaults.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import streamlit as st

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/pressy.db"
SECRETS_SECTION = "pressy"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    db_path: str = DEFAULT_DB_PATH
    seed_demo_data: bool = False


def _read_secrets() -> Mapping[str, Any]:
    """Return the ``[pressy]`` secrets section, or an empty mapping."""
    try:
        if hasattr(st, "secrets") and SECRETS_SECTION in st.secrets:
            return dict(st.secrets[SECRETS_SECTION])
    except Exception:
        # No secrets.toml outside of a deployed app
        logger.debug("Streamlit secrets unavailable, using environment")
    return {}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def load_settings(secrets: Optional[Mapping[str, Any]] = None) -> Settings:
    """Build settings from secrets, environment and defaults (in that order)."""
    if secrets is None:
        secrets = _read_secrets()

    db_path = secrets.get("db_path") or os.getenv("PRESSY_DB_PATH") or DEFAULT_DB_PATH

    seed_raw = secrets.get("seed_demo_data")
    if seed_raw is None:
        seed_raw = os.getenv("PRESSY_SEED_DEMO_DATA", "false")

    return Settings(db_path=str(db_path), seed_demo_data=_as_bool(seed_raw))
