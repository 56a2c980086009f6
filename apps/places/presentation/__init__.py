"""Places Presentation Layer."""
