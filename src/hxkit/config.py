"""Application configuration.

AppConfig is a frozen dataclass: fields are checked by the type checker
rather than looked up by string key. Middleware carry their own config dataclasses
(see ``hxkit.middleware.htmx.HtmxConfig``).
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    ``debug`` includes exception details in error responses::

        config = AppConfig(debug=True)
    """

    debug: bool = False
