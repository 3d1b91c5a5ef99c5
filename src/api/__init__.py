"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Handles requests and responses.
    No business logic.

Contains:
    - FastAPI routers (submissions, diagnostics)
    - Request/Response models (Pydantic)
    - Dependency injection setup
    - Middleware configuration (CORS, logging)
    - Server entry point (server.py)

Does NOT contain:
    - Business logic (belongs to Domain layer)
    - Orchestration (belongs to Application layer)
    - Database operations (belongs to Infrastructure layer)
"""
