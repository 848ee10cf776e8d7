"""Service layer — the pagination walk and the calculation run."""
