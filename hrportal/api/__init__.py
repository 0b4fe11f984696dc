"""FastAPI adapter for the hrportal access engine."""
