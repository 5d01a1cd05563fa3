"""
FastAPI routers grouped by domain (reminders, weather).

Each file inside this package exposes an APIRouter that is included by the
application factory in skynote.app.
"""
