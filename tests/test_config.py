import os

from searchcrawler.infrastructure.config import load_config


def test_defaults(monkeypatch):
    for name in ("SEARCHCRAWLER_OUTPUT_DIR", "SEARCHCRAWLER_TOP_ENTRIES", "SEARCHCRAWLER_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    cfg = load_config()
    assert cfg.output.top_entries == 10
    assert cfg.output.all_data_path == os.path.join("output", "output.csv")
    assert cfg.output.top_data_path == os.path.join("output", "topHitsOutput.csv")
    assert cfg.debug is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SEARCHCRAWLER_OUTPUT_DIR", str(tmp_path))
    monkeypatch.setenv("SEARCHCRAWLER_TOP_ENTRIES", "3")
    monkeypatch.setenv("SEARCHCRAWLER_DEBUG", "true")
    cfg = load_config()
    assert cfg.output.all_data_path == str(tmp_path / "output.csv")
    assert cfg.output.top_entries == 3
    assert cfg.debug is True


def test_non_numeric_top_entries_keeps_default(monkeypatch, caplog):
    monkeypatch.setenv("SEARCHCRAWLER_TOP_ENTRIES", "ten")
    cfg = load_config()
    assert cfg.output.top_entries == 10
    assert "SEARCHCRAWLER_TOP_ENTRIES" in caplog.text
