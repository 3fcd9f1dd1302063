"""Bookstore vertical — in-memory inventory of books.

Brings the patterns together in one domain:
- Book hierarchy (physical, digital, display-only) with kind-specific fulfillment
- BookStore with add, lookup, purchase and outdated pruning
- FastAPI router with domain-error translation
- MCP server with 4 inventory tools
- Dataclass configuration
"""
