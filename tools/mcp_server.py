# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the four MCP tools of the ID reader.  Each tool is a thin
#   wrapper around core/: it calls the pipeline with the server's
#   namespace store, formats the result, and turns core errors into MCP
#   errors.
#
#     id                 resolve an ID and return its root-context text
#     idx                same, formatted for immediate execution
#     id_set_namespace   set the namespace shorthand IDs expand against
#     id_get_namespace   read it back
#
# HOW IT WORKS (the flow):
#   1. The MCP client calls a tool by name (e.g., "id")
#   2. FastMCP routes the call to the decorated function below
#   3. The function builds an IdResolver around the shared NamespaceStore
#   4. core/resolver.py does the work; core/formatter.py builds the text
#   5. Any core IdError becomes a ToolError "[<kind>] <message>"
#
# RUNNING THIS SERVER:
#     a) Standalone:   python -m tools.mcp_server   (or: id-mcp-reader)
#     b) From an MCP client config, with RPC_URL in its "env" block
# =============================================================================

import logging
import sys
from contextlib import contextmanager

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from core.config import load_settings
from core.ens_client import EnsClient, Web3EnsClient
from core.errors import IdError
from core.formatter import format_id_response, format_idx_response
from core.namespace import NamespaceStore
from core.resolver import IdResolver

load_dotenv()

SERVER_NAME = "id-mcp-reader"
SERVER_VERSION = "1.0.0"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  STDOUT carries the MCP JSON-RPC stream, and anything
# else written there corrupts it.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status/progress messages
#     - RED for errors returned to the caller
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RED = "\033[31m"      # Errors
_RESET = "\033[0m"     # Reset to default terminal color

logging.basicConfig(
    level=load_settings().log_level,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the first line and size of the response in GREEN, then return it."""
    first_line = text.split("\n", 1)[0]
    logging.info(f"{_GREEN}  ← {tool_name} response: {first_line!r} ({len(text)} chars){_RESET}")
    return text


@contextmanager
def _tool_errors(tool_name: str):
    """Turn core errors into ToolErrors the client can read."""
    try:
        yield
    except ToolError:
        raise
    except IdError as exc:
        logging.warning(f"{_RED}  ✗ {tool_name} {exc.kind} error: {exc}{_RESET}")
        raise ToolError(f"[{exc.kind}] {exc}") from exc
    except Exception as exc:
        logging.exception(f"{_RED}  ✗ {tool_name} failed{_RESET}")
        raise ToolError(f"[internal] Error in tool {tool_name}: {exc}") from exc


# =============================================================================
# Namespace & ENS client
# =============================================================================
# One namespace for the whole process: the stdio transport serves a single
# client.  namespace_store and build_ens_client are module attributes so
# tests can swap them without touching the network.
# =============================================================================
namespace_store = NamespaceStore()


def build_ens_client(rpc_url: str) -> EnsClient:
    return Web3EnsClient(rpc_url)


def _resolver() -> IdResolver:
    return IdResolver(
        namespace=namespace_store,
        settings=load_settings(),
        client_factory=lambda rpc_url: build_ens_client(rpc_url),
    )


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION)


# =============================================================================
# TOOL 1: id
# =============================================================================
# The docstring is the tool description the LLM reads.  It spells out the
# prefix rule, shorthand expansion and ID → ENS conversion.
# =============================================================================
@mcp.tool(name="id")
def resolve_id(id: str, start_line: int = 0) -> str:
    """Loads prompts from ENS root-context text records.

    Args:
        id: Required - The ID of the prompt to load (e.g., id:core.subname).
            MUST ALWAYS include the 'id:' prefix.
        start_line: Optional - The line number to start reading from (default: 0).

    Returns:
        The root-context text, preceded by a metadata block with the ID,
        the resolved ENS name (e.g., subname.core.eth), the source
        ("ENS Text Record (root-context)") and the start line.

    Usage:
        - Full path: id:core.subname (resolves to subname.core.eth)
        - Shorthand: id:'subname (uses the current namespace; if the
          namespace is "core", resolves to subname.core.eth)
        - With line number: pass start_line (e.g., start_line: 100)

    Namespace Resolution:
        - In a shorthand ID the apostrophe is replaced with the current
          namespace, joined to the name with a period.
        - Resolving a full path saves everything before the last part as
          the current namespace (id:core.subname sets "core").

    ID to ENS Conversion:
        - id:core.subname becomes subname.core.eth
        - The parts are reversed and .eth is appended.

    Requires a configured Ethereum RPC endpoint (RPC_URL).
    """
    _log_request("id", id=id, start_line=start_line)

    with _tool_errors("id"):
        resolution = _resolver().resolve(id, start_line)
        _log_status(f"Resolved {id} → {resolution.ens_name} ({len(resolution.content)} chars)")
        return _log_response("id", format_id_response(resolution))


# =============================================================================
# TOOL 2: idx
# =============================================================================
# Same pipeline as "id"; only the formatting differs.  The record is fetched
# once and the execution hint is chosen from that same content.
# =============================================================================
@mcp.tool(name="idx")
def resolve_idx(id: str, start_line: int = 0) -> str:
    """Similar to the id tool, but prepares content for immediate execution.

    Args:
        id: Required - The ID of the prompt to load and execute
            (e.g., idx:core.subname or id:core.subname).
        start_line: Optional - The line number to start reading from (default: 0).

    Returns:
        The same metadata block and content as the id tool under an
        "IDX Execution Context" header, followed by an "Execution Ready"
        section with a suggested command:
        - HTML with JavaScript: open in a browser
        - Bash / shell scripts: run with bash
        - Python: run with the python interpreter
        - Node.js / npm: run with node
        - Anything else: create the appropriate file and execute it

    Both id: and idx: prefixes are accepted, as are shorthand IDs
    (idx:'subname).  All other rules are the same as for the id tool.
    """
    _log_request("idx", id=id, start_line=start_line)

    with _tool_errors("idx"):
        resolution = _resolver().resolve(id, start_line)
        _log_status(f"Resolved {id} → {resolution.ens_name} for execution")
        return _log_response("idx", format_idx_response(resolution))


# =============================================================================
# TOOL 3: id_set_namespace
# =============================================================================
@mcp.tool(name="id_set_namespace")
def set_namespace(namespace: str) -> str:
    """Sets the current namespace for use with id: and idx: commands.

    Args:
        namespace: Required - The namespace to set, with the 'id:' prefix
            (e.g., id:core).

    Returns:
        A confirmation message.

    Example:
        id_set_namespace id:core sets the namespace to 'core', after which
        id:'subname resolves to subname.core.eth.

    Single-part namespaces like 'idreg' and hierarchical namespaces like
    'core.user' are both supported.
    """
    _log_request("id_set_namespace", namespace=namespace)

    with _tool_errors("id_set_namespace"):
        namespace_store.set(namespace)
        return _log_response("id_set_namespace", f"Namespace set to: {namespace}")


# =============================================================================
# TOOL 4: id_get_namespace
# =============================================================================
@mcp.tool(name="id_get_namespace")
def get_namespace() -> str:
    """Retrieves the current namespace, prefixed with 'id:'.

    Returns:
        The current namespace (e.g., id:core), or an error if no namespace
        has been set yet.

    Useful for recalling the namespace before using shorthand IDs like
    id:'subname.
    """
    _log_request("id_get_namespace")

    with _tool_errors("id_get_namespace"):
        return _log_response("id_get_namespace", namespace_store.get())


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    settings = load_settings()
    if not settings.rpc_configured:
        _log_status("RPC_URL is not set; id and idx will refuse to run until it is")
    logging.info("ID MCP Reader server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
