"""Domain layer - detection models and protocols."""
