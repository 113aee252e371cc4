"""Infrastructure layer - Frameworks, drivers, and adapters."""
