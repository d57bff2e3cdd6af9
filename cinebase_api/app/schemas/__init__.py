"""
Pydantic schema definitions for API payloads.

Each domain (movies, people, cast) defines its own Pydantic models for
fixtures and response bodies.
"""
