"""peer-trust — local and global trust ledger for peer-to-peer reputation.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import peer_trust
>>> peer_trust.__version__
'0.1.0'

Quick start
-----------
::

    from peer_trust import PeerTrustStore, TrustConfig

    store = PeerTrustStore(TrustConfig.new(1.0, n_neighbors=8))
    store.init_local_trust("peer-a")
    store.update_local_trust("peer-a", 0.5)
    store.get_normalized_local_trust("peer-a")
"""
from __future__ import annotations

__version__: str = "0.1.0"

from peer_trust.config import TrustConfig, UnknownPeerPolicy
from peer_trust.errors import (
    InvalidTrustValueError,
    PeerTrustError,
    SnapshotKeyCollisionError,
    UnknownPeerError,
)
from peer_trust.models import TrustLedgerSnapshot
from peer_trust.store import PeerTrustStore
from peer_trust.values import (
    TrustValue,
    ZeroSumPolicy,
    ensure_trust_value,
    is_trust_value,
    normalize,
    total_trust,
)

__all__ = [
    # version
    "__version__",
    # ledger
    "PeerTrustStore",
    "TrustConfig",
    "TrustLedgerSnapshot",
    "UnknownPeerPolicy",
    "ZeroSumPolicy",
    # score values
    "TrustValue",
    "ensure_trust_value",
    "is_trust_value",
    "normalize",
    "total_trust",
    # errors
    "InvalidTrustValueError",
    "PeerTrustError",
    "SnapshotKeyCollisionError",
    "UnknownPeerError",
]
