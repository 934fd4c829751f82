# Routes package init
"""
Storefront API — Routes Package
=================================

Route Inventory:
    - orders.py:    GET /orders, GET /orders/:id
    - products.py:  GET /products, GET /products/:id
    - health.py:    GET /health               (service health check)

The resource groups are merged into ``route_table``, the single ordered
table that main.py mounts on the FastAPI app.
"""

from storefront.routing import Router
from storefront.routes import orders, products


def build_route_table() -> Router:
    """Merge every resource route group into one table, orders first."""
    table = Router()
    table.include(orders.router)
    table.include(products.router)
    return table


route_table = build_route_table()
