from .config import (
    DEFAULT_PLACEHOLDER,
    DEFAULT_POST_FORMAT,
    DEFAULT_PRIOR_FORMAT,
    DescriptorConfig,
    InvalidTemplate,
)
from .describer import RelativeTimeDescriber, describer
from .instant import Instant, duration_between, to_millis
from .phrase import MagnitudePhrase
from .units import TimeUnit, most_significant

__all__ = [
    "RelativeTimeDescriber",
    "describer",
    "DescriptorConfig",
    "InvalidTemplate",
    "MagnitudePhrase",
    "TimeUnit",
    "most_significant",
    "Instant",
    "duration_between",
    "to_millis",
    "DEFAULT_PLACEHOLDER",
    "DEFAULT_PRIOR_FORMAT",
    "DEFAULT_POST_FORMAT",
]
