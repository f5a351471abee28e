"""Structlog implementation of the ConfigObserver port."""

import structlog


class StructlogConfigObserver:
    """Delegates config domain events to structlog.

    Satisfies the ConfigObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def config_loaded(self, name: str, criteria: list[str]) -> None:
        self._log.info("config.loaded", name=name, criteria=criteria)

    def config_max_score_warning(
        self, max_attainable: int, very_strong_threshold: int
    ) -> None:
        self._log.warning(
            "config.max_score_warning",
            max_attainable=max_attainable,
            very_strong_threshold=very_strong_threshold,
            message="Enabled criteria cannot reach the 'Very Strong' threshold",
        )
