"""MCP server factory — exposes an Environment's REPL commands as tools.

Registers 3 tools: {name}, {name}_address, {name}_help.
Embeds the command reference card in the main tool description.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP
from mcp.types import TextContent

from protonav.commands import CommandDispatcher
from protonav.env import Environment
from protonav.registry import CommandRegistry


def _build_tool_description(name: str, registry: CommandRegistry) -> str:
    """Build the inline tool description embedding the reference card."""
    return (
        f"Navigate the {name} protocol catalog. Each entry is one REPL "
        f"command line, run in order.\n"
        f"Call {name}_help for the full reference card.\n\n"
        f"{registry.generate_reference_card()}"
    )


def create_server(env: Environment, name: str = "protonav", **kwargs) -> FastMCP:
    """Create an MCP server driving *env*.

    Parameters
    ----------
    env : Environment
        The navigation environment the tools operate on.
    name : str
        Tool name prefix.
    **kwargs
        Additional arguments passed to the FastMCP constructor.

    Returns
    -------
    FastMCP
        Configured MCP server ready to run.
    """
    dispatcher = CommandDispatcher(env)
    reference_card = dispatcher.registry.generate_reference_card()

    mcp = FastMCP(**kwargs)

    @mcp.tool(
        name=name,
        description=_build_tool_description(name, dispatcher.registry),
        structured_output=False,
    )
    def run_commands(commands: list[str]) -> TextContent:
        results = [dispatcher.dispatch(line) for line in commands]
        return TextContent(type="text", text="\n".join(r for r in results if r))

    @mcp.tool(name=f"{name}_address", structured_output=False)
    def current_address() -> str:
        """Current package[.service] position (empty when nothing is selected)."""
        return env.address()

    @mcp.tool(name=f"{name}_help", structured_output=False)
    def get_help() -> str:
        """Returns the command reference card."""
        return reference_card

    return mcp
