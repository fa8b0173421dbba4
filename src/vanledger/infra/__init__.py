"""Infrastructure: the HTTP client and the repositories built on it."""
