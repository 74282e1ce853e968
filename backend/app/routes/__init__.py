# Routes package init
"""
Products API — API Routes Package
===================================

Route Inventory:
    - products.py:  GET /api/products/{id}   (single product lookup)
    - error.py:     GET /error               (generic error response)
    - health.py:    GET /health              (liveness probe)

Routes are THIN: extract path parameters, call the service, return the
model. Status-code mapping for application errors lives in main.py.
"""
