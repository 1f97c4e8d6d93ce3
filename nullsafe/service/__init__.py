"""Use-case layer between the HTTP API and the pure domain helpers."""
