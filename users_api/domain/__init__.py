"""Domain layer: entities, interfaces and errors."""
