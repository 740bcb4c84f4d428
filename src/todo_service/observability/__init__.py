"""
todo_service.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation and per-request access logs.
"""

# Package marker.
