"""Services Layer — tool handlers, tool dispatch, and tool descriptors.

Invariants:
    - Handlers split by upstream access pattern (max ~4 methods each)
    - Tool dispatch uses an explicit mapping (no auto-discovery)
"""
