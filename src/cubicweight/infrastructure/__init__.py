"""Infrastructure layer — the HTTP page fetcher."""
