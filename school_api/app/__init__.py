"""FastAPI application: factory, lifespan, middleware and routers."""
