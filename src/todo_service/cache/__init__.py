"""
todo_service.cache

Cache store package (Redis).

Responsibilities:
- Provide the Cache Client and its connection state machine.
"""

# Package marker.
