import pytest
from pydantic import ValidationError

from ridegraph.config import AnalyticsConfig, ObservabilityConfig, get_config
from ridegraph.pipeline import main


def test_log_level_is_normalised(monkeypatch):
    monkeypatch.setenv("RIDEGRAPH_LOG_LEVEL", "debug")

    assert ObservabilityConfig().level == "DEBUG"


def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv("RIDEGRAPH_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        ObservabilityConfig()
    with pytest.raises(ValidationError):
        get_config()


def test_zero_workers_rejected(monkeypatch):
    monkeypatch.setenv("RIDEGRAPH_ANALYTICS_WORKERS", "0")

    with pytest.raises(ValidationError):
        AnalyticsConfig()


def test_negative_top_k_rejected(monkeypatch):
    monkeypatch.setenv("RIDEGRAPH_ANALYTICS_TOP_K", "-1")

    with pytest.raises(ValidationError):
        AnalyticsConfig()


def test_main_reports_invalid_settings(monkeypatch, rides_csv, capsys):
    monkeypatch.setenv("RIDEGRAPH_LOG_LEVEL", "verbose")

    assert main([str(rides_csv)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
