"""HTTP layer — task routes, middleware and exception handlers."""
