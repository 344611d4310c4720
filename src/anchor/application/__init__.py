"""anchor application layer: checks, services and reporters."""
