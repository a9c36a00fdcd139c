"""Public holiday providers."""
