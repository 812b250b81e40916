# =============================================================================
# core/namespace.py  —  Namespace Store
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the "current namespace" that shorthand IDs expand against.
#
#     id_set_namespace("id:core")   →  store "core"
#     id:'subname                   →  "core" + "." + "subname"
#     id:core.user.prompt           →  store "core.user" (implicit update)
#     id_get_namespace()            →  "id:core.user"
#
# ONE STORE PER SERVER PROCESS:
#   tools/mcp_server.py owns a single NamespaceStore and hands it to every
#   IdResolver it builds.  A stdio server talks to exactly one client, so
#   that store is the client's namespace.  No locking: last writer wins.
# =============================================================================

from typing import Optional

from core.errors import ValidationError

NAMESPACE_PREFIX = "id:"


class NamespaceStore:
    """A single optional namespace string (stored without the "id:" prefix)."""

    def __init__(self, initial: Optional[str] = None):
        self._value = initial

    @property
    def current(self) -> Optional[str]:
        return self._value

    def set(self, raw: str) -> str:
        """Store a namespace given in "id:<namespace>" form.

        Single segments ("id:idreg") and dotted paths ("id:core.user") are
        both accepted.  Returns the stored value without its prefix.
        """
        if not raw.startswith(NAMESPACE_PREFIX):
            raise ValidationError("Namespace must start with 'id:' prefix")
        value = raw[len(NAMESPACE_PREFIX):]
        if not value:
            raise ValidationError("Namespace cannot be empty")
        self._value = value
        return value

    def get(self) -> str:
        """Return the namespace with its "id:" prefix re-attached."""
        if not self._value:
            raise ValidationError("No namespace is currently set")
        return NAMESPACE_PREFIX + self._value

    def update(self, value: str) -> None:
        """Overwrite the namespace (used when a full-path ID is resolved)."""
        self._value = value
