"""Plan It Social: plan events with your groups."""

__version__ = "1.0.0"
