"""Infrastructure layer — reading schema and data documents from disk."""
