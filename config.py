"""Environment-driven settings.

``main.py`` loads ``.env`` before anything reads these, so values may come
from the process environment or from that file.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

_TRUE = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime settings for the label service and form builder."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_locale: str = "en"
    translations_dir: Optional[str] = None
    translations_url: Optional[str] = None
    required_by_default: bool = True


def load_settings() -> Settings:
    """Build ``Settings`` from ``LABELS_*`` environment variables."""
    required = os.getenv("LABELS_REQUIRED_BY_DEFAULT")
    return Settings(
        default_locale=os.getenv("LABELS_DEFAULT_LOCALE", "en") or "en",
        translations_dir=os.getenv("LABELS_TRANSLATIONS_DIR") or None,
        translations_url=os.getenv("LABELS_TRANSLATIONS_URL") or None,
        required_by_default=(
            True if required is None else required.strip().lower() in _TRUE
        ),
    )
