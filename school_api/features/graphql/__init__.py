"""GraphQL API: schema, persisted queries and the FastAPI router."""
