# =============================================================================
# core/formatter.py  —  Response Formatting for the id / idx tools
# =============================================================================
#
# The id tool returns a metadata block followed by the content:
#
#     --- ID Metadata ---
#     ID: id:core.subname
#     ENS Name: subname.core.eth
#     Source: ENS Text Record (root-context)
#     Start Line: 0
#
#     --- Content ---
#     <root-context text>
#
# The idx tool returns the same block under an "IDX Execution Context" header
# and appends an "Execution Ready" section with a suggested command.
# =============================================================================

from core.models import IdResolution

ID_HEADER = "--- ID Metadata ---"
IDX_HEADER = "--- IDX Execution Context ---"

_HINT_PREFIX = "💡 Suggested execution: "
_FILENAME_NOTE = "(replace with your desired filename)"

# -----------------------------------------------------------------------------
# Execution hint rules
# -----------------------------------------------------------------------------
# Evaluated in order against the lower-cased content.  Each rule is
# (all-of markers, any-of markers, hint); the first rule that matches wins.
# HTML+JavaScript sits above the Python rule, so a page that mentions
# "python" somewhere still opens in a browser.
# -----------------------------------------------------------------------------
EXECUTION_RULES: list[tuple[tuple[str, ...], tuple[str, ...], str]] = [
    (("html", "javascript"), (), f"{_HINT_PREFIX}`open filename.html` {_FILENAME_NOTE}"),
    ((), ("#!/bin/bash", "bash", "shell"), f"{_HINT_PREFIX}`bash filename.sh` {_FILENAME_NOTE}"),
    ((), ("python", "#!/usr/bin/env python"), f"{_HINT_PREFIX}`python filename.py` {_FILENAME_NOTE}"),
    ((), ("node", "javascript", "npm"), f"{_HINT_PREFIX}`node filename.js` {_FILENAME_NOTE}"),
]
DEFAULT_EXECUTION_HINT = "💡 Create the appropriate file and execute immediately"


def suggest_execution(content: str) -> str:
    """Pick an execution hint by sniffing the content (case-insensitive)."""
    lowered = content.lower()
    for all_of, any_of, hint in EXECUTION_RULES:
        if all_of and not all(marker in lowered for marker in all_of):
            continue
        if any_of and not any(marker in lowered for marker in any_of):
            continue
        return hint
    return DEFAULT_EXECUTION_HINT


def format_id_response(resolution: IdResolution, header: str = ID_HEADER) -> str:
    return (
        f"{header}\n"
        f"ID: {resolution.id}\n"
        f"ENS Name: {resolution.ens_name}\n"
        f"Source: ENS Text Record (root-context)\n"
        f"Start Line: {resolution.start_line}\n"
        f"\n"
        f"--- Content ---\n"
        f"{resolution.content}"
    )


def format_idx_response(resolution: IdResolution) -> str:
    """The id block, relabelled for execution, plus a suggested command."""
    return (
        f"{format_id_response(resolution, header=IDX_HEADER)}\n"
        f"\n"
        f"--- Execution Ready ---\n"
        f"This content is prepared for immediate execution.\n"
        f"{suggest_execution(resolution.content)}"
    )
