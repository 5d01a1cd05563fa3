"""
Core utilities shared across the skynote API.

This package hosts:
- configuration helpers (env vars, storage selection, upstream weather API)
- the exception hierarchy used by services and routers
- cross-cutting helpers such as logging setup, security headers and rate limits

Services and routers depend on these primitives instead of reading
os.environ or configuring logging on their own.
"""
