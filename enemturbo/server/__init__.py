"""FastAPI checkout relay server."""
