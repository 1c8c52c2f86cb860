"""Application layer: services that own and orchestrate domain entities."""
