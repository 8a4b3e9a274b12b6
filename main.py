"""Complexity scorer MCP server - entry point.

Run with ``python main.py [--config PATH] [--log-level LEVEL]``.
"""

from complexity_scorer.server.runner import run_mcp_server

if __name__ == "__main__":
    run_mcp_server()
