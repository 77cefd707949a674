"""Survey, result and wizard session models."""
