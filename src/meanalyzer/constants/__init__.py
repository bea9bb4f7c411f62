"""Constants shared across the package."""

from .columns import *  # noqa: F401,F403
from .defaults import *  # noqa: F401,F403
from .files import *  # noqa: F401,F403
from .markup import *  # noqa: F401,F403
