"""HTTP API for DubHub."""
