"""Core services, configuration and protocols."""
