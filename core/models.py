# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through the resolution pipeline.  They carry no behavior.
#
#   raw ID string ──parse──▶ ParsedIdentifier ──resolve──▶ IdResolution
# =============================================================================

from dataclasses import dataclass, field
from typing import Optional


# -----------------------------------------------------------------------------
# ParsedIdentifier: the output of the Identifier Parser
# -----------------------------------------------------------------------------
# Parsing is pure.  A full path like "id:core.subname" implies that the
# current namespace should become "core", but the parser only REPORTS that in
# implied_namespace.  core/resolver.py decides to apply it.
# -----------------------------------------------------------------------------
@dataclass
class ParsedIdentifier:
    """An identifier split into ENS-ready segments."""

    raw: str                            # Exactly what the caller passed
    scheme: str                         # "id" or "idx"
    segments: list[str] = field(default_factory=list)
    # Outermost namespace first, leaf last: "core.subname" → ["core", "subname"]

    implied_namespace: Optional[str] = None
    # Set only for full paths with 2+ segments: "core.user.x" → "core.user"

    shorthand: bool = False             # True when the ID used the ' marker


# -----------------------------------------------------------------------------
# IdResolution: everything the Response Formatter needs
# -----------------------------------------------------------------------------
@dataclass
class IdResolution:
    """A resolved ID together with its (line-trimmed) root-context content."""

    id: str                             # Echo of the caller's ID
    ens_name: str                       # e.g. "subname.core.eth"
    path: str                           # Same as ens_name
    start_line: int                     # Requested start offset
    content: str                        # Text from start_line onward
    source: str = "ens"                 # Always "ens"
