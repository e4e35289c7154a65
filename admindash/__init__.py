"""admindash: record store API and charts dashboard."""

__version__ = "1.0.0"
