"""TrustConfig — immutable settings injected into a PeerTrustStore.

Holds the score given to newly initialized local peers, a capacity hint for
the expected number of neighbours, and the two policies that resolve the
ledger's edge cases (updates to unknown peers, zero-sum normalization).
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from peer_trust.values import ZeroSumPolicy, ensure_trust_value

V = TypeVar("V")


class UnknownPeerPolicy(str, Enum):
    """What an update does when the peer has no raw trust entry.

    IGNORE:
        Drop the delta. The normalized table is still recomputed.
    INITIALIZE:
        Insert the peer with ``init_trust`` and then apply the delta.
    RAISE:
        Raise UnknownPeerError without touching either table.
    """

    IGNORE = "ignore"
    INITIALIZE = "initialize"
    RAISE = "raise"


class TrustConfig(BaseModel, Generic[V]):
    """Configuration for a PeerTrustStore.

    Parameters
    ----------
    init_trust:
        Raw score assigned by ``init_local_trust`` to a previously unseen peer.
        Any value with trust score arithmetic is accepted, including zero and
        negative values.
    n_neighbors:
        Expected number of neighbours. A hint only; the store never enforces it.
    unknown_peer_policy:
        Behaviour of ``update_*_trust`` for a peer that was never initialized.
    zero_sum_policy:
        Behaviour of normalization when the raw scores sum to exactly zero.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    init_trust: V
    n_neighbors: int = Field(default=0, ge=0)
    unknown_peer_policy: UnknownPeerPolicy = UnknownPeerPolicy.IGNORE
    zero_sum_policy: ZeroSumPolicy = ZeroSumPolicy.IEEE

    @field_validator("init_trust")
    @classmethod
    def check_init_trust(cls, value: Any) -> Any:
        return ensure_trust_value(value, name="init_trust")

    @classmethod
    def new(cls, init_trust: V, n_neighbors: int = 0, **policies: Any) -> "TrustConfig[V]":
        """Build a config from positional arguments.

        Keyword arguments are forwarded as policy fields.
        """
        return cls(init_trust=init_trust, n_neighbors=n_neighbors, **policies)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "init_trust": float(self.init_trust),
            "n_neighbors": self.n_neighbors,
            "unknown_peer_policy": self.unknown_peer_policy.value,
            "zero_sum_policy": self.zero_sum_policy.value,
        }
