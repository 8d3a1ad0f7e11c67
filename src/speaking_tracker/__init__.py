"""Speaking Tracker - events, sessions and submissions for conference speakers."""

__version__ = "0.1.0"
