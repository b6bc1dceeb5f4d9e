"""HTTP layer of the termweb service: config, dependencies, models and routes."""
