"""Infrastructure layer: logging, registries and error handling."""
