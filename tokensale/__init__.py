"""tokensale: signup intake for a token pre-sale.

Applicants register with an email, complete their profile and are finally
locked by an administrator. The core lives in `tokensale.core`; adapters for
storage, identity and mail live in `tokensale.infrastructure`.
"""

__version__ = "1.0.0"
