"""Observer port for the config domain — defines events in domain language."""

from typing import Protocol


class ConfigObserver(Protocol):
    def config_loaded(self, name: str, criteria: list[str]) -> None: ...

    def config_max_score_warning(
        self, max_attainable: int, very_strong_threshold: int
    ) -> None: ...
