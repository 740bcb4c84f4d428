"""
todo_service.api

HTTP layer.

Responsibilities:
- FastAPI app factory, router modules and dependency wiring.
- Request/response models and error-to-response mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: validate the request, call a client, shape the response.
