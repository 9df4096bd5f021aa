#!/usr/bin/env python3
"""Example: Score Types and Edge-Case Policies

Shows the ledger running over exact Fraction scores, auto-initializing
unknown peers, and spreading trust uniformly when all scores are zero.

Usage:
    python examples/02_score_types.py

Requirements:
    pip install peer-trust
"""
from __future__ import annotations

from fractions import Fraction

from peer_trust import (
    PeerTrustStore,
    TrustConfig,
    UnknownPeerError,
    UnknownPeerPolicy,
    ZeroSumPolicy,
)


def main() -> None:
    # Step 1: Exact rational scores
    store = PeerTrustStore(
        TrustConfig.new(
            Fraction(1, 3),
            n_neighbors=2,
            unknown_peer_policy=UnknownPeerPolicy.INITIALIZE,
        )
    )
    store.update_local_trust("node-1", Fraction(2, 3))
    store.update_local_trust("node-2", Fraction(0))
    print("Raw local trust:", store.local_trust_items())
    print("Normalized:", store.normalized_local_trust_items())

    # Step 2: Strict mode rejects updates for peers never initialized
    strict = PeerTrustStore(
        TrustConfig.new(1, unknown_peer_policy=UnknownPeerPolicy.RAISE)
    )
    try:
        strict.update_global_trust("stranger", 5)
    except UnknownPeerError as exc:
        print("\nRejected:", exc)

    # Step 3: Zero-sum normalization
    uniform = PeerTrustStore(
        TrustConfig.new(0.0, zero_sum_policy=ZeroSumPolicy.UNIFORM)
    )
    uniform.init_local_trust("x")
    uniform.init_local_trust("y")
    uniform.normalize()
    print("\nUniform fallback:", uniform.normalized_local_trust_items())
    print("Snapshot:", uniform.snapshot().model_dump_json())


if __name__ == "__main__":
    main()
