from pathlib import Path

from cyclopts import App
from pytest_mock import MockerFixture
from rich.console import Console

from ldpsuite.cli import CLIContext, create_app
from ldpsuite.config import Config, LogLevel


def _run_meta(app: App, tokens: list[str]) -> int | None:
    try:
        app.meta(tokens)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else None
    return None


class TestCLIContext:
    def test_default_context_has_default_config(self) -> None:
        ctx = CLIContext.get_current()

        assert ctx.logger is None
        assert ctx.config.to_dict() == Config.from_dict({}).to_dict()

    def test_set_and_reset(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}), quiet=True)

        CLIContext.set_current(ctx)
        assert CLIContext.get_current() is ctx

        CLIContext.reset()
        assert CLIContext.get_current() is not ctx


    def test_resolve_path_uses_project_root(self, tmp_path: Path) -> None:
        ctx = CLIContext(config=Config.from_dict({}), project_root=tmp_path)

        assert ctx.resolve_path("report") == tmp_path / "report"
        assert ctx.resolve_path("/abs/report") == Path("/abs/report")

    def test_resolve_path_without_project_root(self) -> None:
        ctx = CLIContext(config=Config.from_dict({}))

        assert ctx.resolve_path("report") == Path("report")


class TestGlobalOptions:
    def test_sets_context_for_command_and_resets_after(
        self, mocker: MockerFixture, console: Console, tmp_path: Path
    ) -> None:
        seen: list[CLIContext] = []
        logger = mocker.MagicMock()
        create_logger = mocker.patch(
            "ldpsuite.cli._app.create_cli_logger", return_value=logger
        )
        mocker.patch(
            "ldpsuite.cli._commands._prefer.check_preference_applied",
            side_effect=lambda _values: seen.append(CLIContext.get_current()),
        )
        app = create_app(console=console, error_console=console)

        code = _run_meta(
            app,
            [
                "--quiet",
                "--project-root",
                str(tmp_path),
                "prefer",
                "check",
                "return=representation",
            ],
        )

        assert code in (None, 0)
        (ctx,) = seen
        assert ctx.quiet is True
        assert ctx.project_root == tmp_path
        assert ctx.logger is logger
        assert create_logger.call_args.kwargs["command"] == "prefer"
        assert CLIContext.get_current() is not ctx

    def test_verbose_enables_debug_logging(
        self, mocker: MockerFixture, console: Console, tmp_path: Path
    ) -> None:
        create_logger = mocker.patch("ldpsuite.cli._app.create_cli_logger")
        app = create_app(console=console, error_console=console)

        _ = _run_meta(
            app, ["--verbose", "--project-root", str(tmp_path), "prefer", "build"]
        )

        assert create_logger.call_args.kwargs["level"] == LogLevel.DEBUG.value

    def test_explicit_config_file(
        self, mocker: MockerFixture, console: Console, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "custom.toml"
        _ = config_path.write_text('[logging]\nlevel = "error"\nformat = "text"\n')
        create_logger = mocker.patch("ldpsuite.cli._app.create_cli_logger")
        app = create_app(console=console, error_console=console)

        _ = _run_meta(app, ["--config", str(config_path), "prefer", "build"])

        kwargs = create_logger.call_args.kwargs
        assert kwargs["level"] == "error"
        assert kwargs["log_format"] == "text"

    def test_logs_config_load_failure(
        self, mocker: MockerFixture, console: Console, tmp_path: Path
    ) -> None:
        _ = (tmp_path / "ldpsuite.toml").write_text("[[broken\n")
        logger = mocker.MagicMock()
        _ = mocker.patch("ldpsuite.cli._app.create_cli_logger", return_value=logger)
        app = create_app(console=console, error_console=console)

        _ = _run_meta(app, ["--project-root", str(tmp_path), "prefer", "build"])

        logger.warning.assert_called_once_with(
            "config_load_failed", error=mocker.ANY
        )

    def test_no_color_reaches_context(
        self, mocker: MockerFixture, console: Console, tmp_path: Path
    ) -> None:
        seen: list[CLIContext] = []
        _ = mocker.patch("ldpsuite.cli._app.create_cli_logger")
        _ = mocker.patch(
            "ldpsuite.cli._commands._prefer.check_preference_applied",
            side_effect=lambda _values: seen.append(CLIContext.get_current()),
        )
        app = create_app(console=console, error_console=console)

        _ = _run_meta(
            app, ["--no-color", "--project-root", str(tmp_path), "prefer", "check"]
        )

        assert seen[0].no_color is True
