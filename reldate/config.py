"""Phrase templates that a describer substitutes magnitude phrases into.

A template holds exactly one placeholder (``%@`` unless configured
otherwise) marking where the magnitude phrase ("3 days") goes:

    "%@ ago"                  -> "3 days ago"
    "happening in %@"         -> "happening in 3 days"
"""

import logging
from dataclasses import dataclass

from typing_extensions import override

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "%@"
DEFAULT_PRIOR_FORMAT = "%@ ago"
DEFAULT_POST_FORMAT = "in %@"


class InvalidTemplate(ValueError):
    """A template does not contain exactly one placeholder."""

    def __init__(
        self,
        template: str,
        placeholder: str,
        occurrences: int,
        field: str,
        expected: int = 1,
    ):
        self.template: str = template
        self.placeholder: str = placeholder
        self.occurrences: int = occurrences
        self.field: str = field
        self.expected: int = expected
        if expected == 0:
            message = (
                f"{field} is a literal phrase and must not contain {placeholder!r}, "
                f"found {occurrences} in {template!r}\n"
                f"Example:\n"
                f"  now_format='just now'"
            )
        else:
            message = (
                f"{field} must contain exactly one {placeholder!r} placeholder, "
                f"found {occurrences} in {template!r}\n"
                f"Examples:\n"
                f"  prior_format='{placeholder} ago'\n"
                f"  post_format='in {placeholder}'"
            )
        super().__init__(message)

    @override
    def __reduce__(self) -> tuple[type["InvalidTemplate"], tuple[str, str, int, str, int]]:
        # args only holds the message, so rebuild from the fields
        return (
            type(self),
            (self.template, self.placeholder, self.occurrences, self.field, self.expected),
        )


@dataclass(frozen=True)
class DescriptorConfig:
    """Immutable pair of direction templates.

    Attributes:
        prior_format: Used when the target lies before the reference
        post_format: Used when the target lies after the reference
        placeholder: Marker replaced by the magnitude phrase
        now_format: Literal phrase for a zero-length interval; when None a
            zero interval is described as past ("0 milliseconds ago")
    """

    prior_format: str = DEFAULT_PRIOR_FORMAT
    post_format: str = DEFAULT_POST_FORMAT
    placeholder: str = DEFAULT_PLACEHOLDER
    now_format: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.placeholder, str) or not self.placeholder:
            raise ValueError(
                f"placeholder must be a non-empty string, got {self.placeholder!r}"
            )
        _check_template(self.prior_format, self.placeholder, "prior_format")
        _check_template(self.post_format, self.placeholder, "post_format")
        if self.now_format is not None:
            _check_template(self.now_format, self.placeholder, "now_format", expected=0)

    def render(self, template: str, phrase: object) -> str:
        """Replace the template's placeholder with ``str(phrase)``."""
        return template.replace(self.placeholder, str(phrase), 1)


def _check_template(template: str, placeholder: str, field: str, expected: int = 1) -> None:
    if not isinstance(template, str):
        raise TypeError(
            f"{field} must be a string, got {type(template).__name__!r}: {template!r}"
        )
    occurrences = template.count(placeholder)
    if occurrences != expected:
        logger.debug(
            "Rejected %s %r: %d occurrence(s) of %r", field, template, occurrences, placeholder
        )
        raise InvalidTemplate(template, placeholder, occurrences, field, expected)
