# =============================================================================
# core/fetcher.py  —  Content Fetcher (ENS root-context text record)
# =============================================================================
#
# HOW IT WORKS (the flow):
#   1. Normalize the ENS name           (bad name      → ValidationError)
#   2. Find the name's resolver         (none          → ValidationError)
#   3. Compute the namehash (node)
#   4. Read text(node, "root-context")  (empty         → ValidationError)
#   5. Anything else that raises        →  InternalError with the original
#                                          message attached
#
# One resolver lookup, one record read.  No retries, no caching, and no
# timeout beyond the HTTP provider's default.
# =============================================================================

import logging

from ens.exceptions import InvalidName

from core.ens_client import EnsClient
from core.errors import IdError, InternalError, ValidationError

logger = logging.getLogger(__name__)

ROOT_CONTEXT_KEY = "root-context"


def fetch_root_context(client: EnsClient, ens_name: str) -> str:
    """Return the root-context text record for ens_name.

    Raises:
        ValidationError: the name is malformed, has no resolver, or has no
            root-context record.
        InternalError: the RPC call failed for any other reason.
    """
    try:
        try:
            normalized = client.normalize(ens_name)
        except InvalidName as exc:
            raise ValidationError(f"Invalid ENS name {ens_name}: {exc}") from exc

        resolver = client.find_resolver(normalized)
        if not resolver:
            raise ValidationError(f"No resolver found for ENS name: {ens_name}")

        node = client.namehash(normalized)
        logger.debug("Reading %s from %s via resolver %s", ROOT_CONTEXT_KEY, normalized, resolver)
        record = client.read_text(resolver, node, ROOT_CONTEXT_KEY)

        if not record:
            raise ValidationError(f"No root-context text record found for: {ens_name}")
        return record
    except IdError:
        raise
    except Exception as exc:
        raise InternalError(f"Failed to resolve ENS name {ens_name}: {exc}") from exc
