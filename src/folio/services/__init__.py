"""Service layer — page assembly and ServiceResult-returning operations.

Services may import from domain, config and infrastructure layers.
They must never import from commands or output.
"""
