"""Identity Issuer implementations."""
