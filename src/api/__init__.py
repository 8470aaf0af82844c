"""
Sorting Visualizer - API Layer

REST interface over the command interpreter, the step sequencer and
visualization sessions.

Structure:
- routes/     : Endpoint handlers
- schemas/    : Pydantic schemas
- middleware/ : Error handling
"""

from api.main import create_app

__all__ = ["create_app"]
