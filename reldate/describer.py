"""Describe the interval between two instants as a single relative phrase.

The description names the most significant unit only: two instants 3 days
and 2 hours apart are described in days ("3 days ago", "in 3 days").
"""

import logging
from dataclasses import replace
from datetime import timedelta
from time import time as current_time

from typing_extensions import override

from reldate.config import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_POST_FORMAT,
    DEFAULT_PRIOR_FORMAT,
    DescriptorConfig,
)
from reldate.instant import Instant, duration_between, timedelta_millis
from reldate.phrase import MagnitudePhrase

logger = logging.getLogger(__name__)


class RelativeTimeDescriber:
    """Immutable formatter for relative time phrases.

    Holds a prior template (target before reference) and a post template
    (target after reference). Instances hold no mutable state and can be
    shared freely between threads.
    """

    __slots__ = ("_config",)

    def __init__(
        self,
        prior_format: str = DEFAULT_PRIOR_FORMAT,
        post_format: str = DEFAULT_POST_FORMAT,
        *,
        placeholder: str = DEFAULT_PLACEHOLDER,
        now_format: str | None = None,
    ):
        """
        Initialize a describer.

        Args:
            prior_format: Template for targets before the reference, e.g. "%@ ago"
            post_format: Template for targets after the reference, e.g. "in %@"
            placeholder: Marker in each template replaced by the magnitude phrase
            now_format: Optional literal phrase for zero-length intervals

        Raises:
            InvalidTemplate: If either template lacks exactly one placeholder
        """
        config = DescriptorConfig(
            prior_format, post_format, placeholder=placeholder, now_format=now_format
        )
        object.__setattr__(self, "_config", config)
        logger.debug("Created %r", self)

    @classmethod
    def from_config(cls, config: DescriptorConfig) -> "RelativeTimeDescriber":
        return cls(
            config.prior_format,
            config.post_format,
            placeholder=config.placeholder,
            now_format=config.now_format,
        )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def config(self) -> DescriptorConfig:
        return self._config

    @property
    def prior_format(self) -> str:
        return self._config.prior_format

    @property
    def post_format(self) -> str:
        return self._config.post_format

    def with_formats(self, **changes: str | None) -> "RelativeTimeDescriber":
        """Return a new describer with some config fields replaced.

        Accepts the same keyword names as the constructor.
        """
        return self.from_config(replace(self._config, **changes))

    def magnitude(
        self, target: Instant, reference: Instant | None = None
    ) -> MagnitudePhrase:
        """Return the count and unit describing the interval, without a template."""
        duration = self._duration(target, reference)
        return MagnitudePhrase.of(abs(duration))

    def describe(self, target: Instant, reference: Instant | None = None) -> str:
        """
        Describe ``target`` relative to ``reference``.

        Args:
            target: The instant being described
            reference: The instant it is described from; None means the
                current time

        Returns:
            The post template filled in when target is after reference,
            otherwise the prior template

        Example:
            >>> from datetime import datetime, timedelta, timezone
            >>> now = datetime(2025, 1, 1, tzinfo=timezone.utc)
            >>> describer().describe(now - timedelta(minutes=90), now)
            '1 hour ago'
            >>> describer().describe(now + timedelta(days=3), now)
            'in 3 days'
        """
        return self.describe_duration(self._duration(target, reference))

    __call__ = describe

    def describe_duration(self, duration: int | float | timedelta) -> str:
        """Describe a signed duration in milliseconds (or a timedelta).

        Positive durations lie in the future. Fractions of a millisecond are
        truncated toward zero before the direction is chosen.
        """
        if isinstance(duration, timedelta):
            duration = timedelta_millis(duration)
        elif isinstance(duration, (int, float)) and not isinstance(duration, bool):
            duration = int(duration)
        else:
            raise TypeError(
                f"duration must be int or float milliseconds, or a timedelta.\n"
                f"Got {type(duration).__name__!r}: {duration!r}"
            )

        config = self._config
        if duration == 0 and config.now_format is not None:
            return config.now_format

        phrase = MagnitudePhrase.of(abs(duration))
        template = config.post_format if duration > 0 else config.prior_format
        return config.render(template, phrase)

    def _duration(self, target: Instant, reference: Instant | None) -> int:
        if reference is None:
            reference = current_time() * 1000
        return duration_between(target, reference)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelativeTimeDescriber):
            return NotImplemented
        return self._config == other._config

    @override
    def __hash__(self) -> int:
        return hash(self._config)

    @override
    def __repr__(self) -> str:
        config = self._config
        return (
            f"RelativeTimeDescriber(prior_format={config.prior_format!r}, "
            f"post_format={config.post_format!r})"
        )


def describer(
    prior_format: str = DEFAULT_PRIOR_FORMAT,
    post_format: str = DEFAULT_POST_FORMAT,
    *,
    placeholder: str = DEFAULT_PLACEHOLDER,
    now_format: str | None = None,
) -> RelativeTimeDescriber:
    """
    Return a describer for the given pair of templates.

    Args:
        prior_format: Template for targets before the reference
        post_format: Template for targets after the reference
        placeholder: Marker replaced by the magnitude phrase (default "%@")
        now_format: Optional literal phrase for zero-length intervals

    Returns:
        RelativeTimeDescriber using the templates verbatim

    Raises:
        InvalidTemplate: If either template lacks exactly one placeholder

    Example:
        >>> from reldate import describer
        >>>
        >>> # "3 days ago" / "in 3 days"
        >>> default = describer()
        >>>
        >>> # "occurred 10 seconds in the past" / "happening in 10 seconds"
        >>> verbose = describer("occurred %@ in the past", "happening in %@")
        >>>
        >>> # Python-style placeholder with a dedicated zero phrase
        >>> braces = describer("{} ago", "in {}", placeholder="{}", now_format="now")
    """
    return RelativeTimeDescriber(
        prior_format, post_format, placeholder=placeholder, now_format=now_format
    )
