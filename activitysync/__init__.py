"""Event transforms and sync-folder discovery for activity tracking data."""

__version__ = "0.1.0"