"""Application Store implementations.

Provides an in-memory store and a JSON-file backed store, both keyed by
private identifier with a secondary lookup by public identifier.
Bounded Context: Persistence
"""
