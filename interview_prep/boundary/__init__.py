"""Boundary layer: adapters to the database."""
