"""Main entry point when executing tokensale as a package.

This allows running the package using python -m tokensale.
"""

from tokensale.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
