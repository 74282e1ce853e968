"""
Products API — Application Package Initializer
================================================

Architecture Note:
    A request travels through three layers:

    ┌─────────────────────────────────────┐
    │     Middleware (Pipeline stages)    │  ← request ID, logging, errors, HTTPS
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← product lookup
    └─────────────────────────────────────┘

    Schemas (Pydantic) define what crosses the HTTP boundary.
"""

__version__ = "1.0.0"
