"""Infrastructure: LLM clients, database access and logging."""
