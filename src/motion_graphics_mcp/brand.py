"""Brand color lookup with a fixed fallback palette.

A :class:`BrandColorSource` wraps whatever supplies the brand bible (an
injected object, or the HTTP provider built from ``BRAND_BIBLE_URL``).
The provider handle is resolved lazily on first use and kept; the color
*values* are fetched again on every call. Any failure (no provider, a
raised or timed-out call, a malformed payload) yields
:data:`DEFAULT_BRAND_COLORS` and is never surfaced to the caller.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import Any, Protocol

import httpx

from .config import get_config
from .errors import BrandProviderError
from .models.brand import DEFAULT_BRAND_COLORS, BrandBible, BrandColors

logger = logging.getLogger(__name__)


class BrandBibleProvider(Protocol):
    """Anything with ``get_brand_bible()`` returning ``{"colors": {...}}``.

    The method may be sync or async, and may raise.
    """

    def get_brand_bible(self) -> Any: ...


class HttpBrandBibleProvider:
    """Fetch the brand bible as JSON over HTTP."""

    def __init__(
        self,
        url: str,
        token: str = "",
        timeout: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self._token = token
        self._timeout = timeout
        self._transport = transport

    async def get_brand_bible(self) -> dict:
        """GET the configured URL and return the decoded JSON object.

        Raises:
            httpx.HTTPError: On transport failures or non-2xx status.
            BrandProviderError: If the body is not a JSON object.
        """
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.get(self.url, headers=headers)
            resp.raise_for_status()
            try:
                payload = resp.json()
            except ValueError as exc:
                raise BrandProviderError(f"Brand bible at {self.url} is not valid JSON") from exc

        if not isinstance(payload, dict):
            raise BrandProviderError(
                f"Brand bible at {self.url} must be a JSON object, got {type(payload).__name__}"
            )
        return payload


def provider_from_config() -> BrandBibleProvider | None:
    """Build the HTTP provider when ``BRAND_BIBLE_URL`` is configured."""
    cfg = get_config()
    if not cfg.brand_provider_enabled:
        return None
    return HttpBrandBibleProvider(
        cfg.brand_bible_url,
        token=cfg.brand_bible_token,
        timeout=cfg.brand_color_timeout_seconds,
    )


async def _fetch(provider: BrandBibleProvider) -> Any:
    """Call the provider without blocking the event loop.

    Sync providers run in a worker thread so a stalled call can be timed out.
    """
    get = provider.get_brand_bible
    if inspect.iscoroutinefunction(get):
        return await get()
    result = await asyncio.to_thread(get)
    if inspect.isawaitable(result):
        result = await result
    return result


class BrandColorSource:
    """Resolve brand colors, falling back to the default palette on any failure.

    Args:
        provider: Explicit provider. Skips lazy resolution when given.
        provider_factory: Called on first use when no provider was injected.
            A ``None`` result is not cached, so a provider configured later
            is still picked up.
        timeout: Bound in seconds on one lookup, sync or async. Defaults to
            ``brand_color_timeout_seconds`` from config, read per call.
        fallback: Palette returned when the lookup fails.
    """

    def __init__(
        self,
        provider: BrandBibleProvider | None = None,
        *,
        provider_factory: Callable[[], BrandBibleProvider | None] = provider_from_config,
        timeout: float | None = None,
        fallback: BrandColors = DEFAULT_BRAND_COLORS,
    ) -> None:
        self._provider = provider
        self._factory = provider_factory
        self._timeout = timeout
        self.fallback = fallback
        self.last_source = "unresolved"

    def _resolve_provider(self) -> BrandBibleProvider | None:
        if self._provider is None:
            try:
                self._provider = self._factory()
            except Exception as exc:
                logger.debug("Brand bible provider unavailable: %s", exc)
                return None
        return self._provider

    def _timeout_seconds(self) -> float:
        if self._timeout is not None:
            return self._timeout
        return get_config().brand_color_timeout_seconds

    def reset(self) -> None:
        """Forget a lazily resolved provider (used after config changes)."""
        self._provider = None
        self.last_source = "unresolved"

    async def get_colors(self) -> BrandColors:
        """Fetch colors once from the provider; never raises."""
        provider = self._resolve_provider()
        if provider is None:
            logger.debug("No brand bible provider, using default colors")
            self.last_source = "fallback:no-provider"
            return self.fallback

        try:
            result = await asyncio.wait_for(_fetch(provider), timeout=self._timeout_seconds())
            colors = BrandBible.model_validate(result, from_attributes=True).resolve_colors(self.fallback)
        except Exception as exc:
            logger.debug("Failed to get brand bible, using default colors: %s", exc)
            self.last_source = f"fallback:{type(exc).__name__}"
            return self.fallback

        self.last_source = "provider"
        return colors


_default_source: BrandColorSource | None = None


def get_default_source() -> BrandColorSource:
    """Process-wide source wired to :func:`provider_from_config`."""
    global _default_source
    if _default_source is None:
        _default_source = BrandColorSource()
    return _default_source


def reset_default_source() -> None:
    global _default_source
    _default_source = None
