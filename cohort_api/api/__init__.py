"""
API module - FastAPI routers, route handlers and error handlers.

Usage:
    from cohort_api.api.routes import api_router
    app.include_router(api_router, prefix="/api")
"""
