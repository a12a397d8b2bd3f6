"""Tests for CLI functionality."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from cfgtree.features.persistence import SqliteResourceStore
from cfgtree.platform.db.db_manager import DatabaseManager
from cfgtree.ui.cli import CommandProcessor, main
from cfgtree.ui.cli.args.options import DeleteArgs, ShowArgs
from cfgtree.ui.cli.commands import DeleteCommand, ShowCommand


@pytest.fixture(autouse=True)
def neutral_runtime(mocker: MockerFixture) -> None:
    """Keep CLI runs away from the user's configuration and log files."""

    config = mocker.patch("cfgtree.ui.cli.args.parser.Config")
    config.load.return_value.log_file = None
    config.load.return_value.db_path = None
    _ = mocker.patch("cfgtree.ui.cli.args.parser.setup_logger")


@pytest.fixture
def mock_logger(mocker: MockerFixture) -> MagicMock:
    """Create a mock logger.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Mock logger instance.
    """
    return mocker.patch("cfgtree.ui.cli.cli.logger")


def test_init_and_write(tmp_path: Path) -> None:
    """Commands run against the database named on the command line."""

    db_path = tmp_path / "store.db"
    input_path = tmp_path / "cfg.json"
    _ = input_path.write_text(json.dumps({"title": "Site"}), encoding="utf-8")

    CommandProcessor.process_command(["init-context", "/content/site", "--db", str(db_path), "--quiet"])
    CommandProcessor.process_command(
        ["write", "/content/site", "cfg", str(input_path), "--db", str(db_path), "--quiet"]
    )

    with DatabaseManager(db_path) as manager:
        store = SqliteResourceStore(manager)
        node = store.resolve("/content/site/configs/cfg")
        assert node is not None
        assert store.properties(node) == {"title": "Site"}


def test_configuration_error_exits_with_one(tmp_path: Path, mock_logger: MagicMock) -> None:
    input_path = tmp_path / "cfg.json"
    _ = input_path.write_text("{}", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(
            ["write", "/content/missing", "cfg", str(input_path), "--db", str(tmp_path / "s.db")]
        )

    assert excinfo.value.code == 1
    mock_logger.error.assert_called_once()
    assert "/content/missing" in str(mock_logger.error.call_args.args[1])


def test_invalid_input_exits_with_one(tmp_path: Path, mock_logger: MagicMock) -> None:
    input_path = tmp_path / "cfg.json"
    _ = input_path.write_text("[1, 2]", encoding="utf-8")
    db_path = str(tmp_path / "s.db")
    CommandProcessor.process_command(["init-context", "/content/site", "--db", db_path, "--quiet"])

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["write", "/content/site", "cfg", str(input_path), "--db", db_path])

    assert excinfo.value.code == 1
    assert mock_logger.error.call_args.args[0] == "Invalid input: %s"


def test_keyboard_interrupt(mock_logger: MagicMock, mocker: MockerFixture) -> None:
    _ = mocker.patch.object(CommandProcessor, "build_command", side_effect=KeyboardInterrupt)

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["show"])

    assert excinfo.value.code == 130
    mock_logger.info.assert_called_once()


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (ShowArgs(command="show", db_path=None, verbose=False, quiet=False, path="/"), ShowCommand),
        (
            DeleteArgs(
                command="delete",
                db_path=None,
                verbose=False,
                quiet=False,
                context_path="/content/site",
                name="cfg",
            ),
            DeleteCommand,
        ),
    ],
)
def test_build_command_dispatches_on_args(args: ShowArgs | DeleteArgs, expected: type) -> None:
    assert isinstance(CommandProcessor.build_command(args), expected)


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch.object(CommandProcessor, "process_command")

    assert main() == 0
    process.assert_called_once_with()
