from pathlib import Path

from snippetdoc.config import GeneratorConfig


def test_defaults_follow_cwd(tmp_path, monkeypatch):
    for name in ("SNIPPETDOC_INPUT_DIR", "SNIPPETDOC_OUTPUT_DIR", "SNIPPETDOC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    config = GeneratorConfig.from_env(cwd=tmp_path)

    assert config.input_dir == tmp_path
    assert config.output_dir == tmp_path
    assert config.index_name == "README.md"
    assert config.detail_name == "SNIPPETS.md"
    assert config.extension == ".codesnippet"


def test_environment_overrides(tmp_path, monkeypatch):
    monkeypatch.setenv("SNIPPETDOC_INPUT_DIR", str(tmp_path / "in"))
    monkeypatch.setenv("SNIPPETDOC_OUTPUT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("SNIPPETDOC_EXTENSION", "snip")
    monkeypatch.setenv("SNIPPETDOC_LOG_LEVEL", "debug")

    config = GeneratorConfig.from_env()

    assert config.input_dir == tmp_path / "in"
    assert config.output_dir == tmp_path / "out"
    assert config.extension == ".snip"
    assert config.log_level == "DEBUG"


def test_unknown_log_level_falls_back_to_info():
    config = GeneratorConfig(input_dir=".", output_dir=".", log_level="chatty")

    assert config.log_level == "INFO"
    assert config.input_dir == Path(".")
