"""
Bookstore MCP Server Template — FastMCP Pattern

Every MCP server follows this pattern:
- FastMCP decorators for clean tool definition
- Typed parameters and return values
- Error handling with structured responses instead of raised exceptions
"""
from datetime import datetime, timezone

from fastmcp import FastMCP


def create_server(name: str, instructions: str = "") -> FastMCP:
    """Factory for creating MCP servers with standard config."""
    mcp = FastMCP(name, instructions=instructions or None)

    # Register health check tool (all servers get this)
    @mcp.tool()
    def health_check() -> dict:
        """Check if this MCP server is operational."""
        return {
            "server": name,
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    return mcp


def error_result(exc: Exception) -> dict:
    """Structured failure payload shared by every tool."""
    return {
        "success": False,
        "error": getattr(exc, "kind", type(exc).__name__),
        "detail": str(exc),
    }
