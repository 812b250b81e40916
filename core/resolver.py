# =============================================================================
# core/resolver.py  —  The Resolution Pipeline
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. Gate: RPC_URL must be configured          → ConfigurationError
#   2. Parse the ID against the current namespace
#   3. Apply the namespace a full path implies   (visible, explicit step)
#   4. Segments → ENS name
#   5. Fetch the root-context record              (the only network I/O)
#   6. Trim to start_line
#
# IdResolver knows nothing about MCP.  tools/mcp_server.py builds one per call
# from the server's NamespaceStore, the current Settings and an ENS client.
# =============================================================================

import logging
from typing import Callable

from core.config import Settings, require_rpc_url
from core.ens_client import EnsClient
from core.errors import ValidationError
from core.fetcher import fetch_root_context
from core.identifier import parse_identifier, split_scheme, to_ens_name
from core.lines import extract_lines
from core.models import IdResolution
from core.namespace import NamespaceStore

logger = logging.getLogger(__name__)


class IdResolver:
    """Resolves IDs against one NamespaceStore.

    Args:
        namespace: The NamespaceStore (read for shorthand IDs,
            written when a full path is resolved).
        settings: Current Settings; checked before anything else.
        client_factory: Called with the RPC URL to get an EnsClient.  Only
            invoked once the gate and the ID checks have passed.
    """

    def __init__(
        self,
        namespace: NamespaceStore,
        settings: Settings,
        client_factory: Callable[[str], EnsClient],
    ):
        self.namespace = namespace
        self.settings = settings
        self.client_factory = client_factory

    def resolve(self, raw_id: str, start_line: int = 0) -> IdResolution:
        rpc_url = require_rpc_url(self.settings)

        # Prefix check comes before the start_line check so a malformed ID
        # always reports the prefix problem first.
        split_scheme(raw_id)
        if start_line < 0:
            raise ValidationError(f"start_line must be 0 or greater, got {start_line}")

        parsed = parse_identifier(raw_id, self.namespace.current)
        if parsed.implied_namespace is not None:
            self.namespace.update(parsed.implied_namespace)
            logger.debug("Namespace set to %s by %s", parsed.implied_namespace, raw_id)

        ens_name = to_ens_name(parsed.segments)
        content = fetch_root_context(self.client_factory(rpc_url), ens_name)

        return IdResolution(
            id=raw_id,
            ens_name=ens_name,
            path=ens_name,
            start_line=start_line,
            content=extract_lines(content, start_line),
        )
