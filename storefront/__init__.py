"""
Storefront API — Application Package
======================================

Layout:

    ┌─────────────────────────────────────┐
    │        main.py (FastAPI app)        │  ← middleware, handlers, lifespan
    ├─────────────────────────────────────┤
    │     routes/ (orders, products)      │  ← route groups, plain-text bodies
    ├─────────────────────────────────────┤
    │      routing.py (route table)       │  ← pattern matching, dispatch
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
