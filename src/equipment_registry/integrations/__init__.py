"""Storage integrations for the equipment registry."""
