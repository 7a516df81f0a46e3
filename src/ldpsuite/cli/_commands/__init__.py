"""ldpsuite CLI commands."""
# pyright: reportUnusedCallResult=false

from cyclopts import App

from ._config import app as config_app
from ._coverage import app as coverage_app
from ._links import app as links_app
from ._prefer import app as prefer_app

__all__ = [
    "config_app",
    "coverage_app",
    "links_app",
    "prefer_app",
    "register_commands",
]


def register_commands(app: App) -> None:
    app.command(config_app)
    app.command(coverage_app)
    app.command(links_app)
    app.command(prefer_app)
