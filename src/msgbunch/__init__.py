"""msgbunch: pack long text into chat messages that fit a length limit."""

from msgbunch.builder import (
    DEFAULT_SPLIT_CHARS,
    MsgBunchBuilder,
    default_split_predicate,
    split_on,
)
from msgbunch.bunch import MSG_LIMIT, MsgBunch
from msgbunch.config import (
    BunchConfig,
    MsgBunchConfig,
    default_config,
    load_config,
    save_config,
)
from msgbunch.exceptions import (
    BuilderConsumedError,
    ConfigError,
    MsgBunchError,
    OversizedInputError,
    UnsplittableSectionError,
)
from msgbunch.trim import split_trim

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SPLIT_CHARS",
    "MSG_LIMIT",
    "BuilderConsumedError",
    "BunchConfig",
    "ConfigError",
    "MsgBunch",
    "MsgBunchBuilder",
    "MsgBunchConfig",
    "MsgBunchError",
    "OversizedInputError",
    "UnsplittableSectionError",
    "__version__",
    "default_config",
    "default_split_predicate",
    "load_config",
    "save_config",
    "split_on",
    "split_trim",
]
