"""Interface for interacting with the operator (output only).

Defines the contract for displaying applications, information and errors,
allowing different UI implementations (e.g., console, test double).
"""

import abc
from typing import Any, List

from tokensale.domain.models.application import Application, PublicApplication


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user.

        Args:
            error_message: The error message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user."""
        pass

    @abc.abstractmethod
    def display_application(self, application: Application | PublicApplication, **kwargs: Any) -> None:
        """Displays a single application as a field/value listing.

        Args:
            application: Either the full stored record (admin view) or the
                applicant-facing projection.
            **kwargs: Additional display options (e.g. title).
        """
        pass

    @abc.abstractmethod
    def display_applications(self, applications: List[Application], **kwargs: Any) -> None:
        """Displays a list of applications as a table."""
        pass
