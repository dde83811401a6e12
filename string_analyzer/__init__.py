"""String Analyzer Service: analyse, store and query text strings over HTTP."""

__version__ = "1.0.0"
