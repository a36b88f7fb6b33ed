"""Core domain: models, ports, date and text formatting."""
