"""CLI entrypoint in offline mode."""

import json

import pytest

import main


@pytest.fixture(autouse=True)
def _offline(monkeypatch, tmp_path):
    monkeypatch.setenv("SETTINGS_STORE_PATH", str(tmp_path))
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("APP_CONFIG_PATH", raising=False)


def test_mock_run_prints_json(capsys) -> None:
    main.main(["--mock", "--city", "Paris", "--country", "France", "--no-ai"])

    body = json.loads(capsys.readouterr().out)
    assert body["location"] == {"city": "Paris", "country": "France"}
    assert body["clothing"]["primary_type"] == "light_jacket"
    assert body["clothing"]["ai_enhanced"] is False
    assert body["news"]["headlines"]


def test_mock_run_without_news(capsys) -> None:
    main.main(["--mock", "--no-news", "--threshold", "15"])

    body = json.loads(capsys.readouterr().out)
    assert body["news"] is None
    assert body["clothing"]["primary_type"] == "winter_jacket"


def test_threshold_out_of_range_exits() -> None:
    with pytest.raises(SystemExit):
        main.main(["--mock", "--threshold", "40"])


@pytest.mark.parametrize("extra", [["--threshold", "5"], ["--no-news"]])
def test_user_id_cannot_be_combined_with_inline_settings(extra) -> None:
    with pytest.raises(SystemExit):
        main.main(["--mock", "--user-id", "alice", *extra])


def test_user_id_loads_stored_settings(tmp_path, capsys) -> None:
    (tmp_path / "alice.json").write_text(
        json.dumps({"user_id": "alice", "preferences": {"temperature_threshold": 15, "news_enabled": False}})
    )

    main.main(["--mock", "--user-id", "alice", "--no-ai"])

    body = json.loads(capsys.readouterr().out)
    assert body["clothing"]["primary_type"] == "winter_jacket"
    assert body["news"] is None
