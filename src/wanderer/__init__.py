"""Wanderer - trail backend schema migrations.

Collection schema migrations for the Wanderer trail application,
together with the runner that applies and reverts them.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
