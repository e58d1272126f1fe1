"""Version information for org-residency."""

__version__ = "0.1.0"
