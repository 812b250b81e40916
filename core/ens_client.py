# =============================================================================
# core/ens_client.py  —  ENS Access via web3.py
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the four ENS operations the fetcher needs behind one small class:
#
#     normalize(name)                    ENSIP-15 name normalization
#     find_resolver(name)                resolver address for the name, or None
#     namehash(name)                     32-byte node for the name
#     read_text(resolver, node, key)     text record value ("" if unset)
#
# Anything with these four methods can stand in for Web3EnsClient.  The
# tests use an in-memory fake; core/fetcher.py never imports web3 itself.
# =============================================================================

import logging
from typing import Optional, Protocol

from ens import ENS
from ens.utils import normal_name_to_hash, normalize_name
from web3 import Web3

logger = logging.getLogger(__name__)

# Minimal public-resolver ABI: only text(bytes32 node, string key)
RESOLVER_TEXT_ABI = [
    {
        "inputs": [
            {"name": "node", "type": "bytes32"},
            {"name": "key", "type": "string"},
        ],
        "name": "text",
        "outputs": [{"name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
]


class EnsClient(Protocol):
    def normalize(self, name: str) -> str: ...

    def find_resolver(self, name: str) -> Optional[str]: ...

    def namehash(self, name: str) -> bytes: ...

    def read_text(self, resolver: str, node: bytes, key: str) -> str: ...


class Web3EnsClient:
    """ENS client backed by a web3.py HTTP provider on Ethereum mainnet."""

    def __init__(self, rpc_url: str, w3: Optional[Web3] = None):
        self.rpc_url = rpc_url
        self._w3 = w3 or Web3(Web3.HTTPProvider(rpc_url))
        self._ens = ENS.from_web3(self._w3)

    def normalize(self, name: str) -> str:
        return normalize_name(name)

    def find_resolver(self, name: str) -> Optional[str]:
        resolver = self._ens.resolver(name)
        if resolver is None:
            return None
        logger.debug("Resolver for %s is %s", name, resolver.address)
        return resolver.address

    def namehash(self, name: str) -> bytes:
        return normal_name_to_hash(name)

    def read_text(self, resolver: str, node: bytes, key: str) -> str:
        contract = self._w3.eth.contract(address=resolver, abi=RESOLVER_TEXT_ABI)
        return contract.functions.text(node, key).call()
