"""prchanges — collect merged pull requests as changelog entries."""

__version__ = "0.1.0"
