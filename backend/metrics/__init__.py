from metrics.dashboard import get_snapshot

__all__ = ["get_snapshot"]
