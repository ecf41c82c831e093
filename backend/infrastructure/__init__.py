"""Infrastructure layer: environment configuration and logging."""
