"""Default Flask configuration.

Any value can be overridden with a ``SIPCALC_``-prefixed environment variable
(e.g. ``SIPCALC_HISTORY_PATH=/tmp/history.json``) or by passing a mapping to
:func:`sipcalc.app.create_app`.
"""


class DefaultConfig:
    CORS_ORIGINS = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
    # None keeps history in memory only
    HISTORY_PATH = None
    HISTORY_LIMIT = 10
    LOG_LEVEL = "INFO"
