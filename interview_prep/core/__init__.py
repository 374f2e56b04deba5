"""Core domain layer: exceptions and the generation gateway."""
