"""Domain layer: the User entity, its field names and the repository contract."""
