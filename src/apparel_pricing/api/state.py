"""Shared engine instance for the API routes."""
from ..engine.pricing_engine import get_engine

engine = get_engine()
