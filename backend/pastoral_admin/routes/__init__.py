# Routes package init
"""
Pastoral Admin Backend — API Routes Package
=============================================

What:  HTTP route handlers, one module per resource.

Route Inventory:
    - church.py:         /api/admin/church[/{id}|/list]
    - address.py:        /api/admin/address[/{id}]
    - industry.py:       /api/admin/industry[/{id}]
    - field_of_work.py:  /api/admin/field-of-work[/{id}]
    - health.py:         GET /health

Handlers stay thin: decode, call the service, shape the response. Every
/api/admin router carries the admin key dependency.
"""
