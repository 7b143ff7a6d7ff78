import pytest

from src.generator import GeneratorConfig, parse_puzzle
from src.main import load_config, main


class TestLoadConfig:
    """Test cases for YAML configuration loading."""

    def test_defaults_without_path(self):
        config = load_config(None)
        assert config == GeneratorConfig()
        assert config.size == 10
        assert config.placement_attempts == 100

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "size: 15\n"
            "seed: 42\n"
            "word_source:\n"
            "  max_workers: 4\n"
            "  max_rounds: 10\n"
        )

        config = load_config(str(path))

        assert config.size == 15
        assert config.seed == 42
        assert config.word_source.max_workers == 4
        assert config.word_source.max_rounds == 10
        assert config.word_source.read_timeout == 3.0

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GeneratorConfig()

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError):
            load_config("does/not/exist.yaml")

    def test_invalid_value(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("size: 0\n")
        with pytest.raises(Exception):  # Pydantic validation error
            load_config(str(path))

    def test_min_word_length_below_three(self, tmp_path):
        """Lengths under 3 can never be placed, so they are rejected up front."""
        path = tmp_path / "config.yaml"
        path.write_text("min_word_length: 2\n")
        with pytest.raises(Exception):  # Pydantic validation error
            load_config(str(path))


class TestMain:
    """Test cases for the command line entry point."""

    def test_words_mode_prints_and_saves(self, tmp_path, capsys):
        """Supplied words are placed offline and exported."""
        output = tmp_path / "puzzle.txt"

        code = main(["--size", "6", "--seed", "3", "--words", "cat,dog", "--output", str(output)])

        assert code == 0
        out = capsys.readouterr().out
        assert "Word Search Grid:" in out
        assert "Find these words:" in out
        assert f"Grid saved to {output}" in out

        puzzle = parse_puzzle(output.read_text())
        assert puzzle.size == 6
        assert puzzle.words == ("CAT", "DOG")

    def test_failure_exit_code(self, capsys):
        """A failed build reports to stderr and exits 1."""
        code = main(["--size", "2"])

        assert code == 1
        assert "Cannot generate puzzle" in capsys.readouterr().err

    def test_bad_config_path(self, capsys):
        code = main(["missing.yaml"])
        assert code == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_invalid_override_reports_error(self, capsys):
        """Command line overrides are validated like config values."""
        code = main(["--size", "0", "--words", "cat"])

        assert code == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_output_flag_uses_default_path(self, tmp_path, monkeypatch, capsys):
        """A bare --output saves to output/puzzle_output.txt."""
        monkeypatch.chdir(tmp_path)

        code = main(["--size", "5", "--seed", "1", "--words", "cat", "--output"])

        assert code == 0
        saved = tmp_path / "output" / "puzzle_output.txt"
        assert saved.exists()
        assert parse_puzzle(saved.read_text()).words == ("CAT",)
