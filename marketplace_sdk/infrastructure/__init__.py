"""Infrastructure: gateway HTTP clients and their exceptions."""
