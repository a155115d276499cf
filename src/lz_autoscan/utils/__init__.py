"""Chain access and scheduling helpers for the autoscan worker."""
