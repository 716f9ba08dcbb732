"""HTTP boundary for the voice note parser (FastAPI)."""
