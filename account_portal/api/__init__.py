"""HTTP API for the account portal."""
