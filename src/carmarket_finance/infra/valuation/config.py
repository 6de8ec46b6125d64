from __future__ import annotations

import os
from dataclasses import dataclass


def _timeout_seconds() -> float:
    raw = os.getenv("VALUATION_SERVICE_TIMEOUT", "5.0")

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(
            f"VALUATION_SERVICE_TIMEOUT must be a number of seconds, got {raw!r}"
        ) from None

    if timeout <= 0:
        raise RuntimeError(f"VALUATION_SERVICE_TIMEOUT must be positive, got {raw!r}")

    return timeout


@dataclass(frozen=True)
class ValuationServiceSettings:
    """
    Connection settings for the external trade-in estimator.

    An unset VALUATION_SERVICE_URL is valid: estimates then always come
    from the local fallback formula. A malformed timeout is a deployment
    error and raises RuntimeError, like a missing DATABASE_URL.
    """

    base_url: str | None = None
    api_key: str = ""
    timeout: float = 5.0

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    @classmethod
    def from_env(cls) -> ValuationServiceSettings:
        return cls(
            base_url=os.getenv("VALUATION_SERVICE_URL") or None,
            api_key=os.getenv("VALUATION_SERVICE_API_KEY", ""),
            timeout=_timeout_seconds(),
        )
