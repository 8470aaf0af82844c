"""
API Routes - HTTP endpoint handlers

Routes receive HTTP requests, validate them, call services,
and return HTTP responses. Each area (commands, animations, sessions)
gets its own router, all included under /api/v1.
"""
