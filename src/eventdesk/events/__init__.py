"""Events: owner-scoped CRUD with filtering, search and pagination."""
