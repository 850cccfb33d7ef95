"""
Tests for configuration loading and the schema check command.
"""

import json

import pytest

from podcast_index import ClientConfig, load_config
from podcast_index.cli import main, select_probes
from podcast_index.transport import DEFAULT_BASE_URL
from podcast_index.validation import DEFAULT_PROBES


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data))
    return path


def test_load_config(tmp_path):
    path = write_config(
        tmp_path,
        {
            "podcast_index": {"api_key": "k", "api_secret": "s", "timeout": 10},
            "probes": [{"endpoint": "stats"}],
        },
    )

    config = load_config(path)

    assert config.api_key == "k"
    assert config.api_secret == "s"
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == 10
    assert config.probes == [{"endpoint": "stats"}]
    assert config.has_credentials
    assert "api_secret" not in repr(config)


def test_load_config_probe_mapping(tmp_path):
    path = write_config(tmp_path, {"probes": {"search": {"q": "news"}}})

    config = load_config(path)

    assert config.probes == [{"endpoint": "search", "query": {"q": "news"}}]
    assert not config.has_credentials


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("PODCAST_INDEX_API_KEY", "envkey")
    monkeypatch.setenv("PODCAST_INDEX_API_SECRET", "envsecret")
    monkeypatch.delenv("PODCAST_INDEX_BASE_URL", raising=False)

    config = ClientConfig.from_env()

    assert config.api_key == "envkey"
    assert config.api_secret == "envsecret"
    assert config.base_url == DEFAULT_BASE_URL


def test_select_probes():
    assert select_probes(ClientConfig(), None) == DEFAULT_PROBES

    config = ClientConfig(probes=[{"endpoint": "search", "query": {"q": "x"}}, {"endpoint": "stats"}])
    probes = select_probes(config, ["stats"])

    assert [(p.endpoint, p.query) for p in probes] == [("stats", {})]


def test_main_with_recorded_responses(tmp_path, capsys):
    stats = dict.fromkeys(
        [
            "feedCountTotal",
            "episodeCountTotal",
            "feedsWithNewEpisodes3days",
            "feedsWithNewEpisodes10days",
            "feedsWithNewEpisodes30days",
            "feedsWithNewEpisodes90days",
            "feedsWithValueBlocks",
        ],
        1000,
    )
    response = {"status": "true", "stats": stats, "description": "Stats for the index"}
    (tmp_path / "stats.json").write_text(json.dumps(response))

    code = main(["--recorded", str(tmp_path), "-e", "stats"])

    assert code == 0
    assert "PASS" in capsys.readouterr().out


def test_main_reports_failures(tmp_path, capsys):
    (tmp_path / "stats.json").write_text(json.dumps({"status": "true"}))

    code = main(["--recorded", str(tmp_path), "-e", "stats"])

    out = capsys.readouterr().out
    assert code == 1
    assert "$.stats: missing required field" in out
    assert "$.description: missing required field" in out


def test_main_without_credentials(monkeypatch):
    monkeypatch.delenv("PODCAST_INDEX_API_KEY", raising=False)
    monkeypatch.delenv("PODCAST_INDEX_API_SECRET", raising=False)

    assert main(["-e", "stats"]) == 2
