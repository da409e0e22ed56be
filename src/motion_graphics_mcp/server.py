"""Main FastMCP server: mounts all sub-servers."""

from __future__ import annotations

import logging

from fastmcp import FastMCP

from .tools.compositor import compositor_server
from .tools.infographic import infographic_server
from .tools.infra import infra_server

logger = logging.getLogger(__name__)

app = FastMCP(
    "motion-graphics",
    instructions=(
        "Turns narration and visual direction into frame-accurate motion graphics "
        "configs for a frame-based renderer: stat counters, progress bars, process "
        "flows, split screens, before/after reveals and picture-in-picture."
    ),
)

app.mount(infographic_server)
app.mount(compositor_server)
app.mount(infra_server)


def main() -> None:
    """Entry-point for ``motion-graphics-mcp`` console script."""
    logger.info("Starting motion-graphics MCP server")
    app.run()


if __name__ == "__main__":
    main()
