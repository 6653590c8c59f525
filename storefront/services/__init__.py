"""Business logic: login, role checks, and order placement."""
