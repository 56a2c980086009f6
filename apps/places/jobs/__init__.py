"""Places maintenance jobs."""
