"""MCP server entry point."""

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from complexity_scorer.core.config import parse_args_and_get_config
from complexity_scorer.core.sentry import init_sentry
from complexity_scorer.server.registry import register_all_tools

mcp = FastMCP("complexity-scorer")


def run_mcp_server(argv: Optional[List[str]] = None) -> None:
    """Run the MCP server.

    This function:
    1. Parses command-line arguments, configures logging, loads the config file
    2. Initializes Sentry error tracking (if configured)
    3. Registers all MCP tools
    4. Starts the MCP server with stdio transport
    """
    parse_args_and_get_config(argv)
    init_sentry()
    register_all_tools(mcp)
    mcp.run(transport="stdio")
