from typing import Protocol


class PromptStore(Protocol):
    def load_all(self) -> dict[str, str]:
        """Return every template in the source set, keyed by category."""
        ...
