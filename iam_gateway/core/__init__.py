"""Core business logic: management client, models and per-service layers."""
