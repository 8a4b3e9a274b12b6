"""Shared pytest fixtures for the complexity-scorer test suite.

This module provides common fixtures used across unit tests:
- Config isolation (reset the process-wide scorer config)
- Config file factory
- Sample code in several languages
- A FastMCP stand-in for tool registration
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict

import pytest

# Add src to path so tests run from a plain checkout
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Config Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def reset_scorer_config():
    """Clear any loaded config before and after each test."""
    from complexity_scorer.core.config import set_scorer_config
    set_scorer_config(None)
    yield
    set_scorer_config(None)


@pytest.fixture
def write_config(tmp_path) -> Callable[[str], str]:
    """Write YAML text to a temporary config file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "complexity-scorer.yaml"
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


# ============================================================================
# Sample Code Fixtures
# ============================================================================

@pytest.fixture
def sample_python_code() -> str:
    """Small Python function with one branch."""
    return "def f():\n    if x:\n        return 1\n"


@pytest.fixture
def sample_go_code() -> str:
    """Small Go function with one nested block."""
    return "func f() {\n if x {\n  return\n }\n}\n"


@pytest.fixture
def sample_snippets() -> Dict[str, str]:
    """Snippets keyed by language name, including some awkward input."""
    return {
        "python": "def handle(request):\n    # validate\n    if request and not request.empty:\n        return 1\n",
        "rust": "fn main() {\n    match x {\n        1 => println!(\"one\"),\n        _ => {}\n    }\n}\n",
        "elixir": "defmodule A do\n  def run(x) do\n    x |> IO.inspect()\n  end\nend\n",
        "lua": "for i = 1, 10 do\n  if i > 5 and i < 8 then print(i) end\nend\n",
        "erlang": "-spec f(X) -> ok.\nf(X) when X > 0 ->\n    case X of\n        1 -> ok\n    end.\n",
        "unbalanced": "}}}}\n{{{{{{{{{{{{{{{{{{{{\n",
        "empty": "",
        "blank": "\n\n   \n",
    }


# ============================================================================
# MCP Fixtures
# ============================================================================

class MockFastMCP:
    """Mock FastMCP class for testing."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.tools: Dict[str, Any] = {}

    def tool(self, **kwargs: Any) -> Any:
        def decorator(func: Any) -> Any:
            self.tools[func.__name__] = func
            return func
        return decorator

    def run(self, **kwargs: Any) -> None:
        pass


@pytest.fixture
def mock_mcp() -> MockFastMCP:
    return MockFastMCP("complexity-scorer-test")
