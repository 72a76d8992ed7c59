"""HTTP layer: request builders, response entities, and the transport."""
