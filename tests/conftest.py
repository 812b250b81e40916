# =============================================================================
# tests/conftest.py  —  Shared fixtures
# =============================================================================
# FakeEnsClient stands in for core.ens_client.Web3EnsClient.  It serves text
# records from a dict and records every call, so tests can check that the
# pipeline makes exactly one resolver lookup and one record read.
# =============================================================================

import pytest
from ens.exceptions import InvalidName

FAKE_RESOLVER = "0x231b0Ee14048e9dCcD1d247744d114a4EB5E8E63"


class FakeEnsClient:
    def __init__(self, records=None, error=None):
        # ens name -> root-context text ("" = resolver exists, record empty)
        self.records = dict(records or {})
        self.error = error
        self.calls = []

    def normalize(self, name):
        self.calls.append(("normalize", name))
        labels = name.split(".")
        if any(not label for label in labels):
            raise InvalidName(f"Empty label in {name!r}")
        return name.lower()

    def find_resolver(self, name):
        self.calls.append(("find_resolver", name))
        if self.error is not None:
            raise self.error
        return FAKE_RESOLVER if name in self.records else None

    def namehash(self, name):
        self.calls.append(("namehash", name))
        return name.encode()

    def read_text(self, resolver, node, key):
        self.calls.append(("read_text", resolver, node, key))
        return self.records.get(node.decode(), "")


@pytest.fixture
def fake_ens():
    return FakeEnsClient({
        "subname.core.eth": "hello world",
        "subname.idreg.eth": "shorthand target",
        "idreg.eth": "root prompt",
        "empty.core.eth": "",
    })


@pytest.fixture
def rpc_env(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://eth-mainnet.example/v2/test-key")


@pytest.fixture
def no_rpc_env(monkeypatch):
    monkeypatch.delenv("RPC_URL", raising=False)
