"""Infrastructure layer: durable storage for the study collections."""
