"""MCP server wiring for the complexity scorer."""
