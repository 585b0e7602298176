"""Command-line entry point for ride-log analytics.

    python -m ridegraph.pipeline [path/to/rides.csv]

Without an argument the dataset path comes from configuration
(RIDEGRAPH_DATASET_DATA_DIR / RIDEGRAPH_DATASET_RIDES_FILE).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import ValidationError

from .adapters.records import CSVRecordSource
from .config import ObservabilityConfig, get_config
from .container import Container
from .domain.errors import RideGraphError
from .ports.records import RecordSourcePort
from .services import RideAnalyticsService

logger = logging.getLogger(__name__)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format from configuration."""
    config = config or get_config().observability
    logging.basicConfig(level=config.level.upper(), format=config.format)


def run_pipeline(rides_path: Optional[Union[str, Path]] = None) -> str:
    """Analyse a ride log and return the rendered report.

    Args:
        rides_path: CSV file to read instead of the configured one.

    Raises:
        DatasetError: If the ride log cannot be read.
    """
    config = get_config()
    container = Container.create_default(config)

    if rides_path is not None:
        path = Path(rides_path)
        dataset = config.dataset.model_copy(
            update={"data_dir": path.parent, "rides_file": path.name}
        )
        container.register(RecordSourcePort, lambda: CSVRecordSource(dataset))

    service: RideAnalyticsService = container.resolve(RideAnalyticsService)
    report = service.analyze()
    return service.render(report)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        configure_logging()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    try:
        print(run_pipeline(args[0] if args else None))
    except RideGraphError as e:
        logger.error("Analysis failed", extra={"error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
