"""Infrastructure tools: 2 tools on a FastMCP sub-server."""

from __future__ import annotations

from typing import Annotated

from fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import Field

from ..brand import get_default_source, reset_default_source
from ..config import get_config, update_config
from ..errors import make_tool_error

infra_server = FastMCP("infra")
_SENSITIVE_CONFIG_FIELDS = {"brand_bible_token", "infra_admin_token"}


def _redacted_config() -> dict:
    """Return runtime config with secret-bearing fields removed."""
    return get_config().model_dump(exclude=_SENSITIVE_CONFIG_FIELDS)


def _enforce_mutation_policy(auth_token: str | None) -> None:
    """Gate mutating infra operations behind explicit policy + optional token."""
    cfg = get_config()
    if not cfg.infra_mutations_enabled:
        raise PermissionError(
            "Infra mutations are disabled by policy. "
            "Set INFRA_MUTATIONS_ENABLED=true to enable mutating infra tools."
        )
    if cfg.infra_admin_token and auth_token != cfg.infra_admin_token:
        raise PermissionError(
            "Invalid or missing infra auth token for mutating operation."
        )


@infra_server.tool(annotations=ToolAnnotations(readOnlyHint=True, idempotentHint=False, openWorldHint=True))
async def infra_brand_colors() -> dict:
    """Resolve the brand palette the generators would use right now.

    Returns:
        Dict with ``colors``, ``source`` ("provider" or "fallback:<reason>")
        and the configured ``provider_url`` (None when unset).
    """
    source = get_default_source()
    colors = await source.get_colors()
    cfg = get_config()
    return {
        "colors": colors.to_renderer(),
        "source": source.last_source,
        "provider_url": cfg.brand_bible_url or None,
    }


@infra_server.tool(
    annotations=ToolAnnotations(
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=False,
    )
)
async def infra_configure(
    brand_bible_url: Annotated[str | None, Field(
        description="http(s) URL returning the brand bible JSON; empty string disables it",
    )] = None,
    brand_bible_token: Annotated[str | None, Field(
        description="Bearer token for the brand bible URL; dropped when the URL changes without one",
    )] = None,
    brand_color_timeout_seconds: Annotated[float | None, Field(
        gt=0, description="Upper bound on one brand color lookup",
    )] = None,
    default_width: Annotated[int | None, Field(ge=1, description="Default canvas width")] = None,
    default_height: Annotated[int | None, Field(ge=1, description="Default canvas height")] = None,
    auth_token: Annotated[str | None, Field(
        description="Optional infra auth token (required when INFRA_ADMIN_TOKEN is configured)",
    )] = None,
) -> dict:
    """Reconfigure the server at runtime: brand bible source, lookup timeout and canvas size.

    Changes take effect immediately for all subsequent tool calls. Calling
    with no arguments only reads the config and is always allowed.

    Returns:
        Dict with ``current_config`` (secrets removed).
    """
    try:
        overrides = {
            "brand_bible_url": brand_bible_url,
            "brand_bible_token": brand_bible_token,
            "brand_color_timeout_seconds": brand_color_timeout_seconds,
            "default_width": default_width,
            "default_height": default_height,
        }
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if overrides:
            _enforce_mutation_policy(auth_token)
            url_changed = (
                brand_bible_url is not None
                and brand_bible_url.strip() != get_config().brand_bible_url
            )
            # The old token must never be sent to a new host.
            if url_changed and brand_bible_token is None:
                overrides["brand_bible_token"] = ""
            update_config(**overrides)
            if brand_bible_url is not None or brand_bible_token is not None:
                reset_default_source()
        return {"current_config": _redacted_config()}
    except Exception as exc:
        return make_tool_error(exc)
