"""HTTP routers mounted under the configured API prefix."""
