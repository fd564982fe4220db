"""Core business logic: API clients, rating rendering, and data models.

This module is framework-agnostic. It has no dependency on MCP, FastMCP,
or any server framework; the server in `place_lookup.server` is a thin
layer of tools over `core.places`.
"""
