"""A side-view arcade shooter on pygame: defend the humanoids from the landers."""

__version__ = "0.1.0"