# Services package init
"""
Products API — Services Layer
===============================

What:  Business logic layer between routes (HTTP) and data.

Service Inventory:
    - ProductService: Read-only lookup over the in-memory product catalog
"""
