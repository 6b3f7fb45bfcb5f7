"""
Containers and ownership helpers: the memo cache used by power_mod, explicit
BigInt handles, and plain-dict snapshots.

Submodules are imported directly (``from gigaint.state.memo import MemoCache``)
so that the core layer can depend on ``memo`` without pulling in ``handles``.
"""
