"""HTTP API for recommendations and shopping lists."""
