"""
Storefront API — Products Routes
==================================

What:  GET /products (index) and GET /products/:id (show).
"""

from storefront.routing import Router

router = Router(tags=["Products"])


@router.get("/products")
def list_products() -> str:
    return "Product Index"


@router.get("/products/:id")
def show_product(id: str) -> str:
    return f"Product {id} Show"
