# =============================================================================
# core/errors.py  —  Error Taxonomy for ID Resolution
# =============================================================================
#
# Every failure the resolution pipeline can report falls into one of three
# kinds.  The kind is machine-readable (tools/ prefixes it onto the MCP
# error message) and the message is written for a human operator.
#
#   configuration  →  the server or the namespace is not set up yet
#                     (placeholder RPC_URL, shorthand ID with no namespace)
#   validation     →  the caller passed something unusable, or ENS said
#                     "nothing here" (no resolver, no root-context record)
#   internal       →  anything else that broke during the network round
#                     trip; the original message is preserved
#
# None of these are retried.  They propagate straight up to the tool layer.
# =============================================================================


class IdError(Exception):
    """Base class for all errors raised by the resolution pipeline."""

    kind = "internal"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(IdError):
    """Missing RPC endpoint, or no namespace set for a shorthand ID."""

    kind = "configuration"


class ValidationError(IdError):
    """Malformed input, or ENS has no resolver / record for the name."""

    kind = "validation"


class InternalError(IdError):
    """Unexpected failure while talking to the Ethereum node."""

    kind = "internal"
