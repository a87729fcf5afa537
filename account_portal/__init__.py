"""Account portal: login, profile and password pages backed by mock endpoints."""
