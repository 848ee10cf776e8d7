"""Output layer — Rich console and result formatters."""
