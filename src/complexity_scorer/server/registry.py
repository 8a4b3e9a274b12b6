"""Central tool registration for MCP server."""

from mcp.server.fastmcp import FastMCP

from complexity_scorer.features.complexity.tools import register_complexity_tools


def register_all_tools(mcp: FastMCP) -> None:
    """Register all MCP tools.

    Complexity (4 tools): score_complexity, extract_complexity_features,
    score_pattern_effectiveness, score_beam_complexity
    """
    register_complexity_tools(mcp)
