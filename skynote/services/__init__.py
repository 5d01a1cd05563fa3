"""
High-level use cases for the skynote API.

Each service module orchestrates repositories/adapters to implement the
business rules (reminder list persistence, weather lookups).

Routers (FastAPI endpoints) call these services instead of touching the
storage backends or the upstream weather API directly.
"""
