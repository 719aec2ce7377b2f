"""Circuit diagram editing engine: models, controllers, export services and settings."""
