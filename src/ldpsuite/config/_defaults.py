"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be passed straight to deep_merge,
which copies it.
"""

from typing import Any

CONFIG_FILENAME = "ldpsuite.toml"

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "report": {
        "output_dir": "report",
        "format": "html",
        "filename": "",
    },
    "catalog": {
        "path": "ldp-tests.toml",
        "order_modules": True,
    },
}
