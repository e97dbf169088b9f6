"""Domain layer: entities, repository contracts and use cases."""
