"""Places API - location directory with proximity search."""
