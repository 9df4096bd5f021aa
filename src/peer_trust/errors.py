"""Exception types raised by the peer trust ledger.

Lookups never raise: an absent peer is reported as ``None``. These errors
cover the cases where the ledger is asked to do something it cannot, such as
storing a value that is not a usable trust score or updating a peer that the
configured policy requires to exist.
"""
from __future__ import annotations


class PeerTrustError(Exception):
    """Base class for all peer_trust errors."""


class UnknownPeerError(PeerTrustError, KeyError):
    """Raised when an update targets a peer that has not been initialized.

    Only raised when the store is configured with
    ``UnknownPeerPolicy.RAISE``.
    """

    def __init__(self, peer_id: object, table: str) -> None:
        self.peer_id = peer_id
        self.table = table
        super().__init__(
            f"Peer {peer_id!r} has no {table} trust entry. "
            f"Call init_{table}_trust() before updating it."
        )

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the whole message.
        return str(self.args[0])


class InvalidTrustValueError(PeerTrustError, TypeError):
    """Raised when a value does not support the trust score arithmetic."""

    def __init__(self, value: object, name: str = "value") -> None:
        self.value = value
        self.name = name
        super().__init__(
            f"{name} must be a numeric trust value supporting +, /, * and "
            f"float(), got {type(value).__name__} {value!r}"
        )


class SnapshotKeyCollisionError(PeerTrustError, ValueError):
    """Raised when two distinct peers share the same ``str()`` form.

    Snapshots key every table by ``str(peer_id)``, so peers such as ``1`` and
    ``"1"`` cannot both be represented.
    """

    def __init__(self, first: object, second: object, table: str) -> None:
        self.peers = (first, second)
        self.table = table
        super().__init__(
            f"Peers {first!r} and {second!r} in the {table} table both "
            f"serialize to {str(first)!r}; use identifiers with distinct "
            "string forms to take a snapshot."
        )
