"""Durable snapshots of in-progress lead forms."""

from .snapshot import SnapshotStore, JsonFileSnapshotStore, MemorySnapshotStore, STORAGE_KEY

__all__ = ["SnapshotStore", "JsonFileSnapshotStore", "MemorySnapshotStore", "STORAGE_KEY"]
