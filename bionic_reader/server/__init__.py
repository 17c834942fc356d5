"""HTTP API for bionic conversion (FastAPI)."""
