"""Domain layer - Entities, services, and repository interfaces."""
