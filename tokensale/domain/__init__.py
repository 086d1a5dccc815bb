"""Domain Layer: application entity, error kinds and collaborator contracts."""
