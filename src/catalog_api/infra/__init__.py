"""Infrastructure layer: SQLModel persistence and concrete implementations."""
