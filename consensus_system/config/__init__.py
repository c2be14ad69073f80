"""Configuration: settings, logging and fixed scoring tables."""
