"""Main entry point for the tokensale application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import asyncio
import logging
from typing import Any, Coroutine, Dict, List, Optional

import typer
from typing_extensions import Annotated

# --- Setup Logging Early ---
# Use basic config until setup_logging is called with the configured settings
logging.basicConfig(level=logging.WARNING, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# --- Core Layer ---
from tokensale.core.command_handler import CommandHandler
from tokensale.core.services.private_handler import PrivateApplicationHandler
from tokensale.core.services.public_handler import PublicApplicationHandler

# --- Infrastructure Layer ---
# Config
from tokensale.infrastructure.config.settings import (
    get_config,
    get_link_base_url,
    get_mail_settings,
    get_store_path,
    load_configuration,
)
# UI
from tokensale.infrastructure.cli.display import ConsoleDisplay
# Storage
from tokensale.infrastructure.storage.json_store import JsonFileApplicationStore
# Identity
from tokensale.infrastructure.identity.uuid_issuer import UuidIdentityIssuer
# Mail
from tokensale.infrastructure.mail.email_sequence import EmailSequenceNotifier, build_private_link
from tokensale.infrastructure.mail.smtp_sender import SmtpEmailSender
# Monitoring
from tokensale.infrastructure.monitoring.logger_setup import (
    DEFAULT_BACKUP_COUNT,
    DEFAULT_MAX_BYTES,
    resolve_level,
    setup_logging,
)

# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root. The public and private handlers share
    the same store instance.
    """
    # 1. Load Configuration First
    load_configuration()
    setup_logging(
        log_level=resolve_level(get_config('logging.level', 'WARNING')),
        log_format=get_config('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        log_file=get_config('logging.file'),
        max_bytes=int(get_config('logging.max_bytes', DEFAULT_MAX_BYTES)),
        backup_count=int(get_config('logging.backup_count', DEFAULT_BACKUP_COUNT)),
    )
    logger.info("Configuration and logging initialized.")

    dependencies: Dict[str, Any] = {}

    # 2. Instantiate Infrastructure Adapters
    dependencies['ui'] = ConsoleDisplay()
    dependencies['store'] = JsonFileApplicationStore(get_store_path())
    dependencies['identity_issuer'] = UuidIdentityIssuer()
    dependencies['email_sender'] = SmtpEmailSender(**get_mail_settings())
    dependencies['notifier'] = EmailSequenceNotifier(
        sender=dependencies['email_sender'],
        link_builder=build_private_link(get_link_base_url()),
    )

    # 3. Instantiate Core Handlers (injecting dependencies)
    dependencies['public_handler'] = PublicApplicationHandler(
        store=dependencies['store'],
        identity_issuer=dependencies['identity_issuer'],
        notifier=dependencies['notifier'],
    )
    dependencies['private_handler'] = PrivateApplicationHandler(store=dependencies['store'])

    # 4. Instantiate Command Handler
    dependencies['command_handler'] = CommandHandler(
        public_handler=dependencies['public_handler'],
        private_handler=dependencies['private_handler'],
        ui=dependencies['ui'],
    )
    logger.info("All dependencies initialized successfully.")
    return dependencies

# --- Get Wired-up Dependencies ---
# Built on first command so that importing the module has no side effects.
_dependencies: Optional[Dict[str, Any]] = None


def get_command_handler() -> CommandHandler:
    global _dependencies
    if _dependencies is None:
        _dependencies = create_dependencies()
    return _dependencies['command_handler']

# --- Typer App Definition ---
app = typer.Typer(
    name="tokensale",
    help="Token pre-sale signup intake: register, complete, lock and review applications.",
    add_completion=False,
)

# --- Helper for Running Async Commands ---
def run_async(coro: Coroutine[Any, Any, bool]) -> None:
    """Runs a handler coroutine from a sync Typer command; exits non-zero on failure."""
    succeeded = asyncio.run(coro)
    if not succeeded:
        raise typer.Exit(code=1)

# --- CLI Commands ---

PrivateIdArgument = Annotated[str, typer.Argument(help="The applicant's private identifier.")]


@app.command()
def signup(
    email: Annotated[str, typer.Argument(help="Email address of the applicant.")],
):
    """Register a new applicant and send them their personal link."""
    run_async(get_command_handler().handle_signup(email))


@app.command()
def update(
    private_id: PrivateIdArgument,
    first_name: Annotated[Optional[str], typer.Option("--first-name", help="First name.")] = None,
    last_name: Annotated[Optional[str], typer.Option("--last-name", help="Last name.")] = None,
    country: Annotated[Optional[str], typer.Option("--country", help="Country of residence.")] = None,
    tx_hash: Annotated[Optional[List[str]], typer.Option("--tx-hash", help="Transaction hash to add (repeatable).")] = None,
    validate: Annotated[bool, typer.Option("--validate/--no-validate", help="Enforce required fields and the lock check.")] = True,
):
    """Complete or change an application."""
    run_async(get_command_handler().handle_update(
        private_id,
        first_name=first_name,
        last_name=last_name,
        country=country,
        tx_hashes=tx_hash,
        validate=validate,
    ))


@app.command()
def show(private_id: PrivateIdArgument):
    """Show an application as the applicant sees it."""
    run_async(get_command_handler().handle_show(private_id))


@app.command()
def lock(private_id: PrivateIdArgument):
    """Lock (finalize) an application and send the confirmation email."""
    run_async(get_command_handler().handle_lock(private_id))


@app.command(name="admin-show")
def admin_show(
    public_id: Annotated[str, typer.Argument(help="The application's public identifier.")],
):
    """Show the full stored record of an application."""
    run_async(get_command_handler().handle_admin_show(public_id))


@app.command(name="admin-list")
def admin_list():
    """List all applications."""
    run_async(get_command_handler().handle_admin_list())

# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    app()


if __name__ == "__main__":
    cli_entry_point()
