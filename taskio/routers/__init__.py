"""Routers package."""
