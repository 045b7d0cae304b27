"""Product CRUD service backed by a managed document store."""
