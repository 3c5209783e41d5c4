"""
Lightweight structured trace logging for balancing runs.

Enabled when the DEBUG_LOG_PATH env var is set. Each call appends one JSON line,
so a run can be replayed stage by stage without raising the normal log level.
"""

from __future__ import annotations

import json
import logging
import os
import time
from typing import Any

logger = logging.getLogger("scrim_balancer.debug")


def debug_log(
    stage: str,
    location: str,
    message: str,
    data: dict[str, Any] | None = None,
    *,
    run_id: str = "run1",
) -> None:
    """
    Append a JSONL trace entry to DEBUG_LOG_PATH if configured.
    """
    path = os.getenv("DEBUG_LOG_PATH")
    if not path:
        return

    payload = {
        "runId": run_id,
        "stage": stage,
        "timestamp": int(time.time() * 1000),
        "location": location,
        "message": message,
        "data": data or {},
    }

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(payload, default=str) + "\n")
    except OSError as exc:
        # Tracing must never change a balancing result
        logger.debug(f"Could not write trace to {path}: {exc}")
