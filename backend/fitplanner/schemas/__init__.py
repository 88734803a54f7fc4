"""Request, response and plan models."""
