# hypixel.py – async helper around the Hypixel public API
# ===============================================================
# • one owned httpx.AsyncClient per bot process
# • fetch_player() returns the raw `player` mapping or raises a
#   HypixelError subclass the cogs can branch on
#
# Tips:
#   await api.connect()   → open the HTTP client
#   await api.close()     → graceful shutdown
# ===============================================================
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger("hypixel")

BASE_URL   = "https://api.hypixel.net"
USER_AGENT = "hypixel-stats-bot/1.0"


# ═══════════════════════ ERRORS ═══════════════════════
class HypixelError(Exception):
    """Base class for everything fetch_player() can raise."""


class PlayerNotFound(HypixelError):
    def __init__(self, username: str) -> None:
        super().__init__(f"player {username!r} not found")
        self.username = username


class RateLimited(HypixelError):
    def __init__(self, retry_after: Optional[int] = None) -> None:
        msg = "rate limited"
        if retry_after is not None:
            msg += f" (retry in {retry_after}s)"
        super().__init__(msg)
        self.retry_after = retry_after


class HypixelUnavailable(HypixelError):
    """Network failure, non-429 HTTP error or garbage payload."""


def _retry_after(response: httpx.Response) -> Optional[int]:
    for header in ("Retry-After", "RateLimit-Reset"):
        value = response.headers.get(header)
        if value and value.isdigit():
            return int(value)
    return None


class HypixelClient:
    """Thin wrapper around an httpx client + the /player endpoint."""

    # ───────────────────────────────────────────────────────────
    # INIT / CLIENT
    # ───────────────────────────────────────────────────────────
    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = 6.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.client: httpx.AsyncClient | None = client
        self._owns_client = client is None

    async def connect(self) -> None:
        """Open the HTTP client (no-op when one was injected)."""
        if self.client is None:
            self.client = httpx.AsyncClient(
                base_url=BASE_URL,
                headers={"API-Key": self.api_key, "User-Agent": USER_AGENT},
                timeout=self.timeout,
            )
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP client if we opened it."""
        if self.client is not None and self._owns_client:
            await self.client.aclose()
            self.client = None

    async def __aenter__(self) -> "HypixelClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()

    # ═══════════════════ PLAYER ═══════════════════
    async def fetch_player(self, username: str) -> Dict[str, Any]:
        """
        Look up one player by name.

        Raises PlayerNotFound, RateLimited or HypixelUnavailable.
        The API key travels in a header and is never logged.
        """
        if self.client is None:
            await self.connect()

        try:
            r = await self.client.get("/player", params={"name": username})
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            if status == 429:
                log.warning("Hypixel rate limit hit looking up %s", username)
                raise RateLimited(_retry_after(exc.response)) from exc
            log.warning("Hypixel request failed (%s) for %s", status, username)
            raise HypixelUnavailable(f"HTTP {status}") from exc
        except httpx.RequestError as exc:
            log.warning("Hypixel request error for %s: %s", username, type(exc).__name__)
            raise HypixelUnavailable(str(exc) or type(exc).__name__) from exc
        except ValueError as exc:
            log.warning("Hypixel returned invalid JSON for %s", username)
            raise HypixelUnavailable("invalid JSON") from exc

        if not isinstance(data, dict) or not data.get("success") or not data.get("player"):
            raise PlayerNotFound(username)
        return data["player"]
