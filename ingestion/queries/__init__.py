"""GraphQL documents sent to the content API, one module per platform."""
