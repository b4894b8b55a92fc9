"""Domain layer: entities, value objects, events and stateless domain services."""
