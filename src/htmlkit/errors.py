"""Exception classes for htmlkit.

Building and rendering never raise in the default configuration; these
exceptions surface only when a caller opts into strict validation.
"""

from __future__ import annotations


class HtmlkitError(Exception):
    """Base exception for all htmlkit errors.

    Subclass this for specific error categories.
    """

    pass


class ContractError(HtmlkitError):
    """Error when an element's allow-list contract is violated.

    Raised instead of a diagnostic report when ``BuildConfig.strict`` is set.
    """

    def __init__(
        self,
        tag: str,
        message: str,
        violation_type: str | None = None,
    ) -> None:
        """Initialize contract error.

        Args:
            tag: Name of the element that rejected the input (e.g., "td")
            message: Description of the contract violation
            violation_type: "disallowed_attribute" or "disallowed_child"
        """
        self.tag = tag
        self.violation_type = violation_type
        super().__init__(f"Tag '{tag}': {message}")
