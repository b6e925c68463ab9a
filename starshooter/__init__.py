"""A small vertical-scrolling space shooter with a local leaderboard."""

__version__ = "0.1.0"