# =============================================================================
# core/identifier.py  —  Identifier Parsing & ID → ENS Name Conversion
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a caller-supplied ID into the ENS name that holds its content.
#
#     "id:core.subname"   →  segments ["core", "subname"]  →  "subname.core.eth"
#     "idx:idreg"         →  segments ["idreg"]            →  "idreg.eth"
#     "id:'subname"       →  (namespace "core")            →  "subname.core.eth"
#
# ID GRAMMAR:
#   <scheme>:<body>
#     scheme  = "id" (plain lookup) | "idx" (execution-flavoured lookup)
#     body    = <segment>("." <segment>)*     full path, outermost first
#             | "'" <segment>                 shorthand, leaf only
#
# Both functions here are pure.  The parser never touches namespace state: it
# is handed the current namespace (for shorthand expansion) and hands back
# the namespace a full path implies.
# =============================================================================

from typing import Optional

from core.errors import ConfigurationError, ValidationError
from core.models import ParsedIdentifier

SCHEMES = ("id", "idx")
SHORTHAND_MARKER = "'"
ENS_SUFFIX = ".eth"


def split_scheme(raw: str) -> tuple[str, str]:
    """Split "id:core.x" into ("id", "core.x").

    Raises ValidationError if the ID carries neither recognised prefix.
    """
    for scheme in SCHEMES:
        prefix = f"{scheme}:"
        if raw.startswith(prefix):
            return scheme, raw[len(prefix):]
    raise ValidationError("ID must start with 'id:' or 'idx:' prefix")


def parse_identifier(raw: str, current_namespace: Optional[str] = None) -> ParsedIdentifier:
    """Parse an ID into ordered segments plus the namespace it implies.

    Args:
        raw: The ID as the caller typed it, e.g. "id:core.subname".
        current_namespace: The current namespace (no prefix), used to
            expand shorthand IDs.  None if no namespace has been set.

    Returns:
        A ParsedIdentifier.  implied_namespace is only filled in for full
        paths with two or more segments; shorthand IDs and bare single
        segments never imply a namespace change.

    Raises:
        ValidationError: missing prefix, or nothing after the prefix.
        ConfigurationError: shorthand ID with no namespace set.
    """
    scheme, body = split_scheme(raw)
    if not body:
        raise ValidationError("Invalid ID format. Cannot be empty.")

    if body.startswith(SHORTHAND_MARKER):
        if not current_namespace:
            raise ConfigurationError(
                "No namespace set for shorthand ID. Use id_set_namespace first."
            )
        leaf = body[len(SHORTHAND_MARKER):]
        if not leaf:
            raise ValidationError("Invalid ID format. Shorthand needs a name after the ' marker.")
        return ParsedIdentifier(
            raw=raw,
            scheme=scheme,
            segments=f"{current_namespace}.{leaf}".split("."),
            shorthand=True,
        )

    segments = body.split(".")
    implied = ".".join(segments[:-1]) if len(segments) >= 2 else None
    return ParsedIdentifier(
        raw=raw,
        scheme=scheme,
        segments=segments,
        implied_namespace=implied,
    )


def to_ens_name(segments: list[str]) -> str:
    """Reverse the segments and append ".eth".

    ["idreg"]            → "idreg.eth"
    ["core", "subname"]  → "subname.core.eth"
    """
    if len(segments) == 1:
        return segments[0] + ENS_SUFFIX
    return ".".join(reversed(segments)) + ENS_SUFFIX
