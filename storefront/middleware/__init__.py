# Middleware package init
"""
Storefront API — Middleware Package
=====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

The request ID is assigned first so the access log line can carry it.
"""
