from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Optional

from ..core.constants import FALLBACK_SUBJECT_NAMES

logger = logging.getLogger(__name__)


def load_subject_names(path: Optional[str | Path]) -> list[str]:
    """Suggested subject names from the first column of a CSV file, sorted.

    A missing or unreadable file yields the built-in list instead.
    """

    if not path:
        return sorted(FALLBACK_SUBJECT_NAMES)

    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            names = [row[0].strip() for row in csv.reader(f) if row and row[0].strip()]
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning(f"Cannot load subject list from {path}, using defaults: {e}")
        return sorted(FALLBACK_SUBJECT_NAMES)

    return sorted(names)
