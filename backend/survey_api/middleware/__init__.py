# Middleware package init
"""
Survey API Backend: Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first: the logging middleware reads it from the ContextVar
    2. Logging: captures status and duration once the handler returns
    3. CORS: FastAPI's CORSMiddleware, every route is public
"""
