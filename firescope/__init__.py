"""Firescope - table browsing core for a terminal firewall dashboard."""

__version__ = "0.1.0"
