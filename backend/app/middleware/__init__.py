# Middleware package init
"""
Products API — Middleware Package
===================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [Exception Handler]
            → [HTTPS Redirect] → Routing → Route Handler

    1. Request ID: Generate correlation ID used by everything below
    2. Logging: Log method, path, final status and duration
    3. Exception Handler: Turn unhandled errors into the /error response
    4. HTTPS Redirect: Starlette's HTTPSRedirectMiddleware (307 to https)
    5. Routing: FastAPI router dispatches to the endpoint

    Responses travel back up the same chain in reverse, so the request ID
    header and the access-log line both see the final status code.
"""
