"""Service layer.

Services hold the domain data and rules, keeping routes and middleware thin:

    Middleware / Routes (HTTP) -> Services (redirect table, validation)

Services should not know about HTTP status codes or response formatting.
"""
