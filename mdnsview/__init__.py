"""mdnsview - a terminal-based mDNS service browser."""

__version__ = "0.1.0"
