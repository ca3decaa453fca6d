"""HTTP adapter — FastAPI application exposing the ``/templates`` endpoints."""
