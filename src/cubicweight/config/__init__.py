"""Configuration: settings sources, TOML discovery, and logging."""
