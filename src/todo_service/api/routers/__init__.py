"""
todo_service.api.routers

Router modules: todos, cache (key/value), health.
"""
