"""
Provides the Jinja2 templates used for applicant email.
"""
from jinja2 import Environment, PackageLoader, select_autoescape

WELCOME_TEMPLATE = "mail/welcome.html"
CONFIRMATION_TEMPLATE = "mail/confirmation.html"


def create_template_environment() -> Environment:
    """Loads templates shipped in the `tokensale/templates` directory."""
    return Environment(
        loader=PackageLoader("tokensale", "templates"),
        autoescape=select_autoescape(["html"]),
    )
