"""Infrastructure layer: durable storage and data sources (network, bundled asset)."""
