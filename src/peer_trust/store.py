"""PeerTrustStore — per-node ledger of local and global peer trust.

The store keeps four tables keyed by peer identifier:

- ``local_trust``: raw first-hand trust in direct neighbours.
- ``global_trust``: raw trust in peers across the wider network.
- ``normalized_local_trust`` and ``normalized_global_trust``: each raw table
  divided by its own sum, rebuilt from scratch by every update.

The normalized tables are derived state. Only the ``set_*`` escape hatches
can make them disagree with the raw tables; call ``normalize()`` afterwards
to restore consistency.

The store does no locking. Hosts that share one instance across threads
must serialize access themselves.
"""
from __future__ import annotations

import copy
import logging
from collections.abc import Hashable
from typing import Any, Generic, Optional, TypeVar

from peer_trust.config import TrustConfig, UnknownPeerPolicy
from peer_trust.errors import SnapshotKeyCollisionError, UnknownPeerError
from peer_trust.models import TrustLedgerSnapshot
from peer_trust.values import ensure_trust_value, normalize

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class PeerTrustStore(Generic[K, V]):
    """Trust ledger for a single peer-to-peer node.

    Parameters
    ----------
    config:
        Initial trust value, neighbour-count hint and edge-case policies.
        Stored by reference; TrustConfig is immutable.

    Example
    -------
    ::

        store = PeerTrustStore(TrustConfig.new(1.0, 2))
        store.init_local_trust("A")
        store.init_local_trust("B")
        store.update_local_trust("A", 1.0)
        store.get_normalized_local_trust("A")  # 0.666...
    """

    def __init__(self, config: TrustConfig[V]) -> None:
        self._config = config
        # Python dicts cannot be presized; n_neighbors stays a hint.
        self._local_trust: dict[K, V] = {}
        self._global_trust: dict[K, V] = {}
        self._normalized_local_trust: dict[K, float] = {}
        self._normalized_global_trust: dict[K, float] = {}

    @property
    def config(self) -> TrustConfig[V]:
        """The configuration this store was built with."""
        return self._config

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def init_local_trust(self, peer_id: K) -> None:
        """Add *peer_id* to the local table with the configured init value.

        Does nothing if the peer already has a local entry. Does not
        renormalize.
        """
        if peer_id not in self._local_trust:
            self._local_trust[peer_id] = self._config.init_trust
            logger.debug(
                "Initialized local trust for %r to %r", peer_id, self._config.init_trust
            )

    def init_global_trust(self, peer_id: K, init_trust_delta: V) -> None:
        """Add *peer_id* to the global table with *init_trust_delta*.

        Does nothing if the peer already has a global entry. Does not
        renormalize.

        Raises
        ------
        InvalidTrustValueError
            If *init_trust_delta* is not a numeric trust value.
        """
        ensure_trust_value(init_trust_delta, name="init_trust_delta")
        if peer_id not in self._global_trust:
            self._global_trust[peer_id] = init_trust_delta
            logger.debug("Initialized global trust for %r to %r", peer_id, init_trust_delta)

    # ------------------------------------------------------------------
    # Updates
    # ------------------------------------------------------------------

    def update_local_trust(self, peer_id: K, trust_delta: V) -> None:
        """Add *trust_delta* to the peer's local score and renormalize.

        An uninitialized peer is handled according to
        ``config.unknown_peer_policy``. Under the default IGNORE policy the
        delta is dropped but the normalized table is still rebuilt.

        Raises
        ------
        InvalidTrustValueError
            If *trust_delta* is not a numeric trust value, or the
            resulting score is too large for ``float()``.
        TypeError
            If the stored score and *trust_delta* cannot be added. The
            tables are left unchanged.
        UnknownPeerError
            If the peer is unknown and the policy is RAISE.
        """
        self._apply_delta(self._local_trust, "local", peer_id, trust_delta)
        self.normalize_local_trust()

    def update_global_trust(self, peer_id: K, trust_delta: V) -> None:
        """Add *trust_delta* to the peer's global score and renormalize.

        Same contract as ``update_local_trust`` but on the global tables.
        """
        self._apply_delta(self._global_trust, "global", peer_id, trust_delta)
        self.normalize_global_trust()

    def _apply_delta(
        self,
        table: dict[K, V],
        table_name: str,
        peer_id: K,
        trust_delta: V,
    ) -> None:
        ensure_trust_value(trust_delta, name="trust_delta")
        if peer_id not in table:
            policy = self._config.unknown_peer_policy
            if policy == UnknownPeerPolicy.RAISE:
                raise UnknownPeerError(peer_id, table_name)
            if policy == UnknownPeerPolicy.IGNORE:
                logger.debug(
                    "Dropping %s trust delta %r for unknown peer %r",
                    table_name,
                    trust_delta,
                    peer_id,
                )
                return
            logger.debug(
                "Auto-initializing %s trust for %r to %r",
                table_name,
                peer_id,
                self._config.init_trust,
            )

        # Nothing is written until the new score is known to be valid.
        new_score = table.get(peer_id, self._config.init_trust) + trust_delta
        ensure_trust_value(new_score, name=f"{table_name} trust for {peer_id!r}")
        table[peer_id] = new_score

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    def normalize_local_trust(self) -> None:
        """Rebuild the normalized local table from the raw local table."""
        self._normalized_local_trust = normalize(
            self._local_trust, self._config.zero_sum_policy
        )
        logger.debug("Normalized local trust over %d peers", len(self._local_trust))

    def normalize_global_trust(self) -> None:
        """Rebuild the normalized global table from the raw global table."""
        self._normalized_global_trust = normalize(
            self._global_trust, self._config.zero_sum_policy
        )
        logger.debug("Normalized global trust over %d peers", len(self._global_trust))

    def normalize(self) -> None:
        """Rebuild both normalized tables."""
        self.normalize_local_trust()
        self.normalize_global_trust()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_local_trust(self, peer_id: K) -> Optional[V]:
        """Return the raw local score for *peer_id*, or None."""
        return self._local_trust.get(peer_id)

    def get_global_trust(self, peer_id: K) -> Optional[V]:
        """Return the raw global score for *peer_id*, or None."""
        return self._global_trust.get(peer_id)

    def get_normalized_local_trust(self, peer_id: K) -> Optional[float]:
        """Return the normalized local score for *peer_id*, or None."""
        return self._normalized_local_trust.get(peer_id)

    def get_normalized_global_trust(self, peer_id: K) -> Optional[float]:
        """Return the normalized global score for *peer_id*, or None."""
        return self._normalized_global_trust.get(peer_id)

    def local_peers(self) -> list[K]:
        return list(self._local_trust)

    def global_peers(self) -> list[K]:
        return list(self._global_trust)

    def local_trust_items(self) -> dict[K, V]:
        return dict(self._local_trust)

    def global_trust_items(self) -> dict[K, V]:
        return dict(self._global_trust)

    def normalized_local_trust_items(self) -> dict[K, float]:
        return dict(self._normalized_local_trust)

    def normalized_global_trust_items(self) -> dict[K, float]:
        return dict(self._normalized_global_trust)

    # ------------------------------------------------------------------
    # Direct writes (bypass renormalization)
    # ------------------------------------------------------------------

    def set_local_trust(self, peer_id: K, value: V) -> bool:
        """Overwrite an existing raw local score without renormalizing.

        Returns False, and stores nothing, if the peer has no local entry.
        The normalized local table goes stale until ``normalize_local_trust``
        or an update runs.
        """
        ensure_trust_value(value, name="value")
        return self._overwrite(self._local_trust, peer_id, value)

    def set_global_trust(self, peer_id: K, value: V) -> bool:
        """Overwrite an existing raw global score without renormalizing."""
        ensure_trust_value(value, name="value")
        return self._overwrite(self._global_trust, peer_id, value)

    def set_normalized_local_trust(self, peer_id: K, value: float) -> bool:
        """Overwrite an existing normalized local score.

        The next update or ``normalize_local_trust`` call discards the value.
        """
        return self._overwrite(self._normalized_local_trust, peer_id, float(value))

    def set_normalized_global_trust(self, peer_id: K, value: float) -> bool:
        """Overwrite an existing normalized global score."""
        return self._overwrite(self._normalized_global_trust, peer_id, float(value))

    @staticmethod
    def _overwrite(table: dict[K, Any], peer_id: K, value: Any) -> bool:
        if peer_id not in table:
            return False
        table[peer_id] = value
        return True

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def copy(self) -> "PeerTrustStore[K, V]":
        """Return an independent deep copy of this store."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, object]:
        """Serialize all four tables and the config to a plain dictionary."""
        return self.snapshot().model_dump()

    def snapshot(self) -> TrustLedgerSnapshot:
        """Return a JSON-friendly snapshot of the ledger.

        Raises
        ------
        SnapshotKeyCollisionError
            If two peers in one table have the same ``str()`` form.
        """
        return TrustLedgerSnapshot(
            local_trust=_stringify_keys(self._local_trust, "local"),
            global_trust=_stringify_keys(self._global_trust, "global"),
            normalized_local_trust=_stringify_keys(
                self._normalized_local_trust, "normalized local"
            ),
            normalized_global_trust=_stringify_keys(
                self._normalized_global_trust, "normalized global"
            ),
            init_trust=float(self._config.init_trust),
            n_neighbors=self._config.n_neighbors,
        )

    def __repr__(self) -> str:
        return (
            f"PeerTrustStore(local_peers={len(self._local_trust)}, "
            f"global_peers={len(self._global_trust)}, "
            f"init_trust={self._config.init_trust!r}, "
            f"n_neighbors={self._config.n_neighbors})"
        )


def _stringify_keys(table: dict[Any, Any], table_name: str) -> dict[str, float]:
    result: dict[str, float] = {}
    originals: dict[str, Any] = {}
    for peer_id, score in table.items():
        key = str(peer_id)
        if key in originals:
            raise SnapshotKeyCollisionError(originals[key], peer_id, table_name)
        originals[key] = peer_id
        result[key] = float(score)
    return result
