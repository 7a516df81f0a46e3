from collections.abc import Callable

import pytest
from rich.console import Console

from ldpsuite.cli import create_app


@pytest.fixture
def ldpsuite_cli(console: Console) -> Callable[..., int]:
    """Create CLI app for testing that returns the exit code.

    Commands run without the global options handler, so they see the
    default CLIContext.
    """
    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        try:
            app(args)
        except SystemExit as e:
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
