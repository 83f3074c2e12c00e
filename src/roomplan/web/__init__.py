"""REST API for room layout sessions and saved designs."""
