"""GraphQL layer (strawberry) for the macro targets backend."""
