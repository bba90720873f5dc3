import pytest

from rates.core.config import Config, load_config
from rates.core.errors import ConfigError


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("input-file: data/in.xml\noutput-file: out/rates.json\n", encoding="utf-8")

    assert load_config(path) == Config(input_file="data/in.xml", output_file="out/rates.json")


def test_config_is_immutable(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("input-file: a.xml\n", encoding="utf-8")
    cfg = load_config(path)
    with pytest.raises(AttributeError):
        cfg.input_file = "b.xml"


def test_missing_keys_become_empty_paths(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("debug: true\n", encoding="utf-8")
    assert load_config(path) == Config(input_file="", output_file="", debug=True)


def test_empty_document(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="read yaml"):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    "text",
    [
        "input-file: [unclosed\n",
        "- just\n- a list\n",
        "input-file:\n  nested: map\n",
    ],
)
def test_invalid_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("text", ["debug: 'false'\n", "debug: 1\n", "debug: [true]\n"])
def test_debug_must_be_boolean(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError, match="debug"):
        load_config(path)


def test_debug_false(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("debug: false\n", encoding="utf-8")
    assert load_config(path).debug is False
