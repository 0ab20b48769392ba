"""Infrastructure Layer - record storage and observability."""
