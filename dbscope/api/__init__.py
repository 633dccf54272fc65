"""HTTP layer: middleware, dependencies and route handlers."""
