"""Store repositories with idempotent upsert and point lookup."""
