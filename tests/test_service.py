"""Tests for the analytics service, container wiring and pipeline entry point."""

import pytest

from ridegraph.adapters.presenter import TextReportPresenter
from ridegraph.adapters.records import CSVRecordSource, InMemoryRecordSource
from ridegraph.config import get_config
from ridegraph.container import Container, get_container, reset_container
from ridegraph.domain.errors import LocationNotFoundError, NoRouteFoundError
from ridegraph.domain.models import AnalysisReport, DistanceStats
from ridegraph.pipeline import main, run_pipeline
from ridegraph.ports.presenter import ReportPresenterPort
from ridegraph.ports.records import RecordSourcePort
from ridegraph.services import RideAnalyticsService


def _service(records, **kwargs) -> RideAnalyticsService:
    return RideAnalyticsService(
        record_source=InMemoryRecordSource(tuple(records)),
        presenter=TextReportPresenter(),
        **kwargs,
    )


def test_analyze_report(rides):
    report = _service(rides, top_k=2).analyze()

    assert report.total_rides == 4
    assert report.num_locations == 4
    assert report.top_routes == ((("A", "B"), 2), (("B", "C"), 1))
    assert report.personal_hub == "A"
    assert report.business_hub == "C"
    assert report.top_route_path == ("A", "B")
    assert report.stats.max == 3


def test_analyze_empty_records():
    report = _service([]).analyze()

    assert report == AnalysisReport(total_rides=0, num_locations=0)
    assert report.stats == DistanceStats(0.0, 0.0, 0)


def test_analyze_is_idempotent(rides):
    service = _service(rides)

    assert service.analyze() == service.analyze()
    assert service.render(service.analyze()) == service.render(service.analyze())


def test_analyze_with_workers_matches_sequential(rides):
    assert _service(rides, workers=3).analyze() == _service(rides).analyze()


def test_solve_named_route(rides):
    assert _service(rides).solve("A", "D") == ["A", "B", "C", "D"]


def test_solve_unknown_location(rides):
    with pytest.raises(LocationNotFoundError) as exc_info:
        _service(rides).solve("A", "Z")

    assert exc_info.value.location == "Z"


def test_solve_no_route(rides):
    with pytest.raises(NoRouteFoundError) as exc_info:
        _service(rides).solve("D", "A")

    assert exc_info.value.origin == "D"
    assert exc_info.value.destination == "A"


def test_render_without_presenter(rides):
    service = RideAnalyticsService(record_source=InMemoryRecordSource(tuple(rides)))

    with pytest.raises(RuntimeError):
        service.render(service.analyze())


def test_text_presenter_output(cycle):
    service = _service(cycle, top_k=1)

    text = service.render(service.analyze())

    assert "Total rides after filter: 3" in text
    assert "  A -> B: 1 trip" in text
    assert "Personal: A" in text
    assert "Business: -" in text
    assert "Shortest A->B: A -> B" in text
    assert "Graph hops: mean 1.00, stddev 0.82, max 2" in text


def test_text_presenter_no_path():
    report = AnalysisReport(
        total_rides=1, num_locations=2, top_routes=((("A", "B"), 1),)
    )

    assert "No path found between A and B." in TextReportPresenter().render(report)


def test_default_container_wiring():
    container = Container.create_default()

    assert isinstance(container.resolve(RecordSourcePort), CSVRecordSource)
    assert isinstance(container.resolve(ReportPresenterPort), TextReportPresenter)
    assert container.resolve(RecordSourcePort) is container.resolve(RecordSourcePort)

    service = container.resolve(RideAnalyticsService)
    assert service.top_k == get_config().analytics.top_k


def test_container_override_record_source():
    container = Container.create_default()
    container.register(RecordSourcePort, InMemoryRecordSource.cycle)

    report = container.resolve(RideAnalyticsService).analyze()

    assert report.total_rides == 3
    assert report.stats.max == 2


def test_container_unregistered_type():
    container = Container()

    assert not container.is_registered(RecordSourcePort)
    with pytest.raises(KeyError):
        container.resolve(RecordSourcePort)


def test_get_container_is_shared():
    first = get_container()

    assert get_container() is first
    reset_container()
    assert get_container() is not first


def test_analytics_settings_from_env(monkeypatch, rides_csv):
    monkeypatch.setenv("RIDEGRAPH_ANALYTICS_TOP_K", "1")
    monkeypatch.setenv("RIDEGRAPH_DATASET_DATA_DIR", str(rides_csv.parent))
    monkeypatch.setenv("RIDEGRAPH_DATASET_RIDES_FILE", rides_csv.name)

    service = Container.create_default().resolve(RideAnalyticsService)
    report = service.analyze()

    assert report.top_routes == ((("Fort Pierce", "West Palm Beach"), 2),)


def test_run_pipeline_on_csv(rides_csv):
    text = run_pipeline(rides_csv)

    assert "Total rides after filter: 4" in text
    assert "Fort Pierce -> West Palm Beach: 2 trips" in text
    assert "Personal: Cary" in text
    assert "Business: Fort Pierce" in text
    assert "Shortest Fort Pierce->West Palm Beach: Fort Pierce -> West Palm Beach" in text
    assert "max 2" in text


def test_main_reports_missing_dataset(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "Error: Failed to load rides" in capsys.readouterr().err


def test_main_prints_report(rides_csv, capsys):
    assert main([str(rides_csv)]) == 0
    assert "Top 3 routes:" in capsys.readouterr().out
