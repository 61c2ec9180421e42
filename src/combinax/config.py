"""Environment-driven settings, read once at import time."""

from __future__ import annotations

import os
from typing import Final

LOG_LEVEL: Final[str] = os.environ.get("COMBINAX_LOG_LEVEL", "WARNING").upper()
GUARD_MESSAGE_SEPARATOR: Final[str] = os.environ.get("COMBINAX_GUARD_SEPARATOR", ", ")
TRACE_DISPATCH: Final[bool] = os.environ.get("COMBINAX_TRACE_DISPATCH", "0") == "1"
