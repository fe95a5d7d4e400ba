"""Small helpers shared by the tooling: logging/metrics and JSON config."""
