"""Panchangam viewer package.

This package contains modules for parsing a panchangam text report, resolving
the current and next tithi/nakshatra/yogam/karanam periods against the local
clock, formatting display strings, and a small Flask web UI.
"""

# Nothing to export at package import time; modules provide the functionality.
__all__ = []
