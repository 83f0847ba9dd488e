"""Infrastructure layer: MongoDB access."""
