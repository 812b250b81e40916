import pytest

from core.config import Settings
from core.errors import ConfigurationError, InternalError, ValidationError
from core.namespace import NamespaceStore
from core.resolver import IdResolver
from tests.conftest import FakeEnsClient

CONFIGURED = Settings(rpc_url="https://eth-mainnet.example/v2/key")


def make_resolver(client, namespace=None, settings=CONFIGURED):
    urls = []

    def factory(rpc_url):
        urls.append(rpc_url)
        return client

    resolver = IdResolver(namespace or NamespaceStore(), settings, factory)
    resolver.factory_calls = urls
    return resolver


def test_end_to_end(fake_ens):
    resolver = make_resolver(fake_ens)
    resolution = resolver.resolve("id:core.subname")
    assert resolution.content == "hello world"
    assert resolution.ens_name == "subname.core.eth"
    assert resolution.path == "subname.core.eth"
    assert resolution.source == "ens"
    assert resolution.id == "id:core.subname"
    assert resolver.factory_calls == [CONFIGURED.rpc_url]


def test_full_path_updates_namespace(fake_ens):
    resolver = make_resolver(fake_ens)
    resolver.resolve("id:core.subname")
    assert resolver.namespace.get() == "id:core"


def test_repeated_resolution_is_idempotent(fake_ens):
    resolver = make_resolver(fake_ens)
    first = resolver.resolve("id:core.subname")
    namespace_after_first = resolver.namespace.current
    second = resolver.resolve("id:core.subname")
    assert first == second
    assert resolver.namespace.current == namespace_after_first == "core"


def test_namespace_updated_even_if_fetch_fails(fake_ens):
    resolver = make_resolver(fake_ens)
    with pytest.raises(ValidationError):
        resolver.resolve("id:other.missing")
    assert resolver.namespace.current == "other"


def test_single_segment_leaves_namespace_alone(fake_ens):
    resolver = make_resolver(fake_ens, NamespaceStore("core"))
    assert resolver.resolve("idx:idreg").content == "root prompt"
    assert resolver.namespace.current == "core"


def test_shorthand_uses_and_keeps_namespace(fake_ens):
    namespace = NamespaceStore()
    namespace.set("id:idreg")
    resolver = make_resolver(fake_ens, namespace)
    resolution = resolver.resolve("id:'subname")
    assert resolution.ens_name == "subname.idreg.eth"
    assert namespace.current == "idreg"


def test_shorthand_without_namespace(fake_ens):
    resolver = make_resolver(fake_ens)
    with pytest.raises(ConfigurationError):
        resolver.resolve("id:'subname")
    assert fake_ens.calls == []


def test_start_line_slices_content():
    client = FakeEnsClient({"subname.core.eth": "line0\nline1\nline2"})
    resolver = make_resolver(client)
    resolution = resolver.resolve("id:core.subname", start_line=1)
    assert resolution.content == "line1\nline2"
    assert resolution.start_line == 1


def test_negative_start_line_rejected_before_network(fake_ens):
    resolver = make_resolver(fake_ens)
    with pytest.raises(ValidationError, match="start_line"):
        resolver.resolve("id:core.subname", start_line=-1)
    assert fake_ens.calls == []
    assert resolver.namespace.current is None


@pytest.mark.parametrize("rpc_url", ["<YOUR-RPC-URL-HERE>", "", "   "])
def test_placeholder_rpc_blocks_everything(fake_ens, rpc_url):
    resolver = make_resolver(fake_ens, settings=Settings(rpc_url=rpc_url))
    with pytest.raises(ConfigurationError, match="RPC_URL"):
        resolver.resolve("invalid-format")
    assert resolver.factory_calls == []


def test_missing_prefix(fake_ens):
    resolver = make_resolver(fake_ens)
    with pytest.raises(ValidationError, match="'id:' or 'idx:'"):
        resolver.resolve("invalid-format", start_line=-3)


def test_internal_errors_propagate():
    client = FakeEnsClient({"subname.core.eth": "x"}, error=TimeoutError("read timed out"))
    resolver = make_resolver(client)
    with pytest.raises(InternalError, match="read timed out"):
        resolver.resolve("id:core.subname")
