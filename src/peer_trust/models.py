"""Pydantic models describing a point-in-time view of a trust ledger."""
from __future__ import annotations

import datetime

from pydantic import BaseModel, Field


def _utcnow_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class TrustLedgerSnapshot(BaseModel):
    """Copy of all four trust tables plus the configuration that built them.

    Peer identifiers are converted with ``str()`` and raw scores with
    ``float()`` so the snapshot is JSON-serializable regardless of the
    key and score types used by the store.
    """

    local_trust: dict[str, float] = Field(default_factory=dict)
    global_trust: dict[str, float] = Field(default_factory=dict)
    normalized_local_trust: dict[str, float] = Field(default_factory=dict)
    normalized_global_trust: dict[str, float] = Field(default_factory=dict)
    init_trust: float
    n_neighbors: int = 0
    taken_at: str = Field(default_factory=_utcnow_iso)
