"""API subpackage - FastAPI application."""
