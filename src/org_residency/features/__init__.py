"""Feature modules for org-residency."""
