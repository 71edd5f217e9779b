"""Domain Layer."""
