"""
Unit tests for the command line interface.
"""
import io
from pathlib import Path

import pytest
from minswpr import Board, BoardConfig, ConfigError, Game, GameState
from minswpr.cli import build_parser, load_config, main, run_game


def parse(*argv: str):
    return build_parser().parse_args(["play", *argv])


# ============================================================================
# Configuration Override Tests
# ============================================================================

class TestLoadConfig:
    """Test how CLI options combine with the config file."""

    @pytest.fixture
    def config_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "custom.toml"
        path.write_text("[board]\nwidth = 12\nheight = 10\nnum_mines = 15\n")
        return path

    def test_file_values(self, config_file: Path) -> None:
        """Values come from the given file."""
        config = load_config(parse("--config", str(config_file)))
        assert config.board == BoardConfig(12, 10, 15)

    def test_dimension_overrides(self, config_file: Path) -> None:
        """Explicit options override the file."""
        config = load_config(parse("--config", str(config_file), "-W", "20", "-m", "3"))
        assert config.board == BoardConfig(20, 10, 3)

    def test_difficulty_overrides_everything(self, config_file: Path) -> None:
        """A difficulty beats file and explicit options."""
        args = parse("--config", str(config_file), "-W", "20", "--difficulty", "expert")
        assert load_config(args).board == BoardConfig(30, 16, 99)

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        """A --config path that does not exist is an error."""
        with pytest.raises(ConfigError, match="could not read"):
            load_config(parse("--config", str(tmp_path / "typo.toml")))

    def test_missing_resolved_file_uses_defaults(
        self, tmp_path: Path, monkeypatch
    ) -> None:
        """Without --config and without a default file the built-in board is used."""
        monkeypatch.chdir(tmp_path)
        assert load_config(parse()).board == BoardConfig()
        assert load_config(parse("-m", "3")).board == BoardConfig(9, 9, 3)

    def test_difficulty_wins_over_unusable_dimensions(self, config_file: Path) -> None:
        """Overridden dimensions are not validated before the difficulty applies."""
        args = parse("--config", str(config_file), "-W", "2", "-H", "2", "--difficulty", "expert")
        assert load_config(args).board == BoardConfig(30, 16, 99)

    def test_difficulty_wins_over_unusable_file(self, tmp_path: Path) -> None:
        """A difficulty option rescues a file whose board is invalid."""
        path = tmp_path / "oversized.toml"
        path.write_text("[board]\nwidth = 2\nheight = 2\nnum_mines = 10\n")
        args = parse("--config", str(path), "--difficulty", "beginner")
        assert load_config(args).board == BoardConfig(9, 9, 10)

    def test_difficulty_without_file(self, tmp_path: Path, monkeypatch) -> None:
        """A difficulty applies when no default file exists."""
        monkeypatch.chdir(tmp_path)
        args = parse("-W", "2", "-H", "2", "--difficulty", "intermediate")
        assert load_config(args).board == BoardConfig(16, 16, 40)

    def test_invalid_override(self, config_file: Path) -> None:
        """Overrides that break the board raise ConfigError."""
        with pytest.raises(ConfigError):
            load_config(parse("--config", str(config_file), "-m", "500"))


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestRunGame:
    """Test the interactive loop."""

    def run(self, game: Game, commands: str) -> str:
        stdout = io.StringIO()
        run_game(game, io.StringIO(commands), stdout)
        return stdout.getvalue()

    def test_reveal_and_win(self) -> None:
        """A reveal command plays the game."""
        game = Game(board=Board.with_mines(3, 3, [(2, 2)]))
        output = self.run(game, "r 0 0\n")
        assert game.state == GameState.WON
        assert "*** WIN! ***" in output

    def test_flag_and_chord(self) -> None:
        """Flag and chord commands reach the board."""
        game = Game(board=Board.with_mines(3, 3, [(2, 2)]))
        self.run(game, "r 1 1\nf 2 2\nc 1 1\n")
        assert game.board.cell(2, 2).is_flagged is True
        assert game.state == GameState.WON

    def test_loss_message(self) -> None:
        """Revealing a mine prints the loss banner."""
        game = Game(board=Board.with_mines(2, 1, [(0, 0)]))
        output = self.run(game, "r 0 0\n")
        assert "*** BOOM ***" in output

    def test_quit_stops_reading(self) -> None:
        """Commands after q are ignored."""
        game = Game(board=Board.with_mines(3, 3, [(2, 2)]))
        self.run(game, "q\nr 0 0\n")
        assert game.state == GameState.READY

    def test_new_game(self) -> None:
        """n starts a fresh round."""
        game = Game(board=Board.with_mines(3, 3, [(2, 2)]))
        self.run(game, "r 2 2\nn\n")
        assert game.state == GameState.READY

    def test_bad_commands_print_help(self) -> None:
        """Unknown or malformed commands show help."""
        game = Game(board=Board.with_mines(3, 3, [(2, 2)]))
        output = self.run(game, "x\nr 1\nr a b\n\n")
        assert output.count("Commands:") == 2
        assert "Invalid position: a b" in output
        assert game.state == GameState.READY


# ============================================================================
# Entry Point Tests
# ============================================================================

class TestMain:
    """Test the main entry point."""

    def test_difficulties_command(self, capsys) -> None:
        """Presets are listed."""
        assert main(["difficulties"]) == 0
        output = capsys.readouterr().out
        assert "beginner" in output
        assert "30x16" in output

    def test_no_command_prints_help(self, capsys) -> None:
        """Running without a command shows usage."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_play_with_bad_config(self, tmp_path: Path, capsys) -> None:
        """A broken config exits with status 1."""
        path = tmp_path / "broken.toml"
        path.write_text("[board]\nnum_mines = 1000\n")
        assert main(["play", "--config", str(path)]) == 1
        assert "could not load configuration" in capsys.readouterr().err

    def test_play_reads_stdin(self, tmp_path: Path, monkeypatch, capsys) -> None:
        """play runs the interactive loop on stdin."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("sys.stdin", io.StringIO("r 0 0\nq\n"))
        assert main(["play", "-W", "4", "-H", "4", "-m", "0"]) == 0
        assert "*** WIN! ***" in capsys.readouterr().out
