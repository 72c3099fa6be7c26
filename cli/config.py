from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TOP_N = 10

_BASE_URL_ENV = "API_BASE_URL"
_TOP_N_ENV = "CLI_TOP_N"


@dataclass(frozen=True)
class CLIConfig:
    base_url: str = DEFAULT_BASE_URL
    top_n: int = DEFAULT_TOP_N


def _read_int(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def load_config(
    base_url: Optional[str] = None,
    top_n: Optional[int] = None,
) -> CLIConfig:
    url = base_url or os.getenv(_BASE_URL_ENV) or DEFAULT_BASE_URL
    if top_n is None:
        top_n = _read_int(os.getenv(_TOP_N_ENV), DEFAULT_TOP_N)
    return CLIConfig(
        base_url=url.rstrip("/"),
        top_n=top_n,
    )
