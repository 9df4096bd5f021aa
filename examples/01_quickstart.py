#!/usr/bin/env python3
"""Example: Quickstart

Builds a small trust ledger, feeds it a few observations, and prints the
normalized local and global trust tables.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install peer-trust
"""
from __future__ import annotations

import peer_trust
from peer_trust import PeerTrustStore, TrustConfig


def main() -> None:
    print(f"peer-trust version: {peer_trust.__version__}")

    # Step 1: Configure and create the ledger
    config = TrustConfig.new(1.0, n_neighbors=3)
    store = PeerTrustStore(config)

    # Step 2: Register direct neighbours
    for peer_id in ("alpha", "beta", "gamma"):
        store.init_local_trust(peer_id)

    # Step 3: Record first-hand observations
    store.update_local_trust("alpha", 2.0)
    store.update_local_trust("gamma", 0.5)

    print("\nNormalized local trust:")
    for peer_id in store.local_peers():
        print(f"  {peer_id:<8} {store.get_normalized_local_trust(peer_id):.3f}")

    # Step 4: Record network-wide reputation received from gossip
    store.init_global_trust("alpha", 4.0)
    store.init_global_trust("delta", 1.0)
    store.update_global_trust("delta", 3.0)

    print("\nNormalized global trust:")
    for peer_id in store.global_peers():
        print(f"  {peer_id:<8} {store.get_normalized_global_trust(peer_id):.3f}")


if __name__ == "__main__":
    main()
