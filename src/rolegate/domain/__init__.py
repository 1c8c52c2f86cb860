"""Domain layer: entities and pure services with no infrastructure dependencies."""
