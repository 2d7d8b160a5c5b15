"""Simulations of CPU scheduling, deadlocks, disk scheduling, page replacement and synchronisation."""

__version__ = "0.1.0"
__all__ = ["deadlock", "disk", "paging", "scheduling", "sync"]