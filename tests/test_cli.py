"""
Tests for the demo CLI, config loading and logging helpers.
"""

import logging

import pytest

from cosine_ann import DimensionMismatch, VectorIndex
from cosine_ann.cli.main import main, parse_vector
from cosine_ann.config import DEFAULT_LOG_LEVEL, DEFAULT_TOP_K, SCORE_PRECISION
from cosine_ann.utils import ConfigLoader, get_logger, load_config, setup_logger


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so each test gets the current stdout."""
    yield
    for name in ("cosine_ann", "cosine-ann-tests"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.setLevel(logging.NOTSET)


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("top_k: 2\nprecision: 2\nlog_level: ERROR\n")
    return path


class TestConfig:
    """Test YAML configuration loading."""

    def test_defaults_without_file(self):
        config = load_config()
        assert config["top_k"] == DEFAULT_TOP_K
        assert config["precision"] == SCORE_PRECISION
        assert config["log_file"] is None

    def test_file_overrides_defaults(self, config_file):
        config = load_config(str(config_file))
        assert config["top_k"] == 2
        assert config["precision"] == 2
        assert config["log_level"] == "ERROR"

    def test_missing_file_loads_empty(self, tmp_path):
        assert ConfigLoader(str(tmp_path / "absent.yaml")).load() == {}
        assert load_config(str(tmp_path / "absent.yaml"))["top_k"] == DEFAULT_TOP_K

    def test_unknown_key_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("metric: euclidean\n")
        with pytest.raises(ValueError, match="metric"):
            load_config(str(path))

    @pytest.mark.parametrize(
        "body",
        ['top_k: "abc"\n', "top_k: -1\n", "top_k: true\n", "precision: 2.5\n", "log_level: 10\n"],
    )
    def test_bad_value_types_rejected(self, tmp_path, body):
        path = tmp_path / "typed.yaml"
        path.write_text(body)
        with pytest.raises(ValueError, match="must be"):
            load_config(str(path))

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            ConfigLoader(str(path)).load()


class TestLogger:
    """Test logger setup helpers."""

    def test_no_duplicate_handlers(self):
        first = setup_logger("cosine-ann-tests", level="DEBUG")
        second = setup_logger("cosine-ann-tests", level="DEBUG")
        assert first is second
        assert len(second.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "ann.log"
        logger = setup_logger("cosine-ann-tests", str(log_file), "INFO")
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in log_file.read_text()

    def test_default_level(self):
        logger = setup_logger()
        assert logger.name == "cosine_ann"
        assert logger.level == logging.getLevelName(DEFAULT_LOG_LEVEL)

    def test_rejected_insert_logged_under_package(self, caplog):
        index = VectorIndex()
        index.insert([1.0, 2.0, 3.0])
        with caplog.at_level(logging.WARNING, logger="cosine_ann"):
            with pytest.raises(DimensionMismatch):
                index.insert([6.0, 7.0])

        assert [r.name for r in caplog.records] == ["cosine_ann.index.vector_index"]
        assert "Rejected insert" in caplog.text

    def test_get_logger_namespace(self):
        assert get_logger("demo").name == "cosine_ann.demo"
        assert get_logger("cosine_ann.index").name == "cosine_ann.index"


class TestDemoCommand:
    """Test the demo entry point output."""

    def test_demo_output(self, capsys):
        assert main(["demo"]) == 0
        out = capsys.readouterr().out

        assert "Top 3 most similar vectors to [1.0, 3.0, 5.0]" in out
        assert "Top 1 most similar vectors to [1.0, 3.0, 5.0]" in out
        assert "  Vector: [1.0, 2.0, 3.0]" in out
        assert "  Score: 0.9939" in out
        assert "  Score: 0.9439" in out
        assert "  Score: 0.9223" in out
        assert "Rejected: Expected a vector of length 3, got length 2" in out
        assert "Index still holds 6 vectors" in out

    def test_demo_result_count(self, capsys):
        main(["demo", "--top-k", "2"])
        out = capsys.readouterr().out
        # two results for top-2 plus one for top-1
        assert out.count("Result ") == 3
        assert "Result 3:" not in out

    def test_demo_with_config(self, capsys, config_file):
        assert main(["--config", str(config_file), "demo"]) == 0
        out = capsys.readouterr().out
        assert "Top 2 most similar vectors" in out
        assert "  Score: 0.99" in out
        assert "  Score: 0.9939" not in out

    def test_demo_custom_query(self, capsys):
        assert main(["demo", "--query=-1,-3,-5", "--top-k", "1"]) == 0
        out = capsys.readouterr().out
        assert "  Vector: [-1.0, -2.0, -3.0]" in out

    def test_demo_query_wrong_length(self, capsys):
        assert main(["demo", "--query", "1,3"]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_demo_bad_config_value(self, capsys, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text('top_k: "abc"\n')
        assert main(["--config", str(path), "demo"]) == 1
        assert "top_k" in capsys.readouterr().err

    def test_invalid_query_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["demo", "--query", "1,x,5"])
        assert exc_info.value.code == 2

    def test_no_command(self, capsys):
        assert main([]) == 1


def test_parse_vector():
    assert parse_vector("1, 3,5") == [1.0, 3.0, 5.0]
