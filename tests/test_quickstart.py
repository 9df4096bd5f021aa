"""Test that the quickstart API works for peer-trust."""
from __future__ import annotations

import pytest


def test_quickstart_import() -> None:
    from peer_trust import PeerTrustStore, TrustConfig

    store = PeerTrustStore(TrustConfig.new(1.0, n_neighbors=8))
    assert store is not None


def test_quickstart_version() -> None:
    import peer_trust

    assert peer_trust.__version__ == "0.1.0"


def test_quickstart_local_example() -> None:
    from peer_trust import PeerTrustStore, TrustConfig

    store = PeerTrustStore(TrustConfig.new(1.0, 2))
    store.init_local_trust("A")
    store.init_local_trust("B")
    store.update_local_trust("A", 1.0)
    assert store.get_normalized_local_trust("A") == pytest.approx(0.6666666)
    assert store.get_normalized_local_trust("B") == pytest.approx(0.3333333)


def test_quickstart_public_names_exported() -> None:
    import peer_trust

    for name in peer_trust.__all__:
        assert hasattr(peer_trust, name), name


def test_quickstart_errors_share_base() -> None:
    from peer_trust import InvalidTrustValueError, PeerTrustError, UnknownPeerError

    assert issubclass(UnknownPeerError, PeerTrustError)
    assert issubclass(InvalidTrustValueError, PeerTrustError)
