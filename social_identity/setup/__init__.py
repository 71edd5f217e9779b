"""Setup: configuration, logging, wiring."""
