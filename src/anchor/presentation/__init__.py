"""anchor presentation layer: command line and pytest plugin."""
