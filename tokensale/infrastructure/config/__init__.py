"""Configuration loading (YAML file, .env file, environment variables)."""
