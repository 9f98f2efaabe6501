"""MCP server exposing the react-image-analyzer report as a tool."""

from __future__ import annotations

import io
import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from rich.console import Console

from .config import PROGRAM_NAME
from .pipeline import run_analysis

logger = logging.getLogger("react_image_analyzer.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name=PROGRAM_NAME)


@mcp.tool()
async def analyze(
    path: str,
) -> str:
    """Report <img> tags missing alt text and image sizes for a React project."""

    source = Path(path).expanduser()
    if not source.exists():
        raise FileNotFoundError(f"Project path does not exist: {source}")

    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, soft_wrap=True, width=200)
    await run_analysis(str(source), console=console)
    return buffer.getvalue()


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
