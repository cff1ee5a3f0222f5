"""Application layer: ports and use cases for the logging gateway."""
