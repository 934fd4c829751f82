"""
Storefront API — Orders Routes
================================

What:  GET /orders (index) and GET /orders/:id (show).
How:   Plain functions registered on a Router; they return the text body.
"""

from storefront.routing import Router

router = Router(tags=["Orders"])


@router.get("/orders")
def list_orders() -> str:
    return "Order Index"


@router.get("/orders/:id")
def show_order(id: str) -> str:
    """``id`` is echoed verbatim; non-numeric ids are accepted."""
    return f"Order {id} Show"
