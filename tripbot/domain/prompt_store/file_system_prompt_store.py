from pathlib import Path

import structlog

logger = structlog.get_logger()


class FilesystemPromptStore:
    """
    PromptStore backed by a local directory of plain-text templates.

    Expected layout:
        prompts/
          conversation.md
          flight_search.md
          ...

    The category is the file name without its suffix. When ``categories``
    is given only those files are read, and any that are missing are
    logged and skipped.
    """

    def __init__(
        self,
        *,
        base_dir: Path,
        suffix: str = ".md",
        categories: list[str] | None = None,
    ) -> None:
        self._base_dir = Path(base_dir)
        self._suffix = suffix
        self._categories = list(categories) if categories is not None else None

    def _paths(self) -> list[tuple[str, Path]]:
        if self._categories is not None:
            return [
                (category, self._base_dir / f"{category}{self._suffix}")
                for category in self._categories
            ]
        if not self._base_dir.is_dir():
            logger.warning("prompt_dir_missing", path=str(self._base_dir))
            return []
        return [
            (path.stem, path)
            for path in sorted(self._base_dir.glob(f"*{self._suffix}"))
            if path.is_file()
        ]

    def load_all(self) -> dict[str, str]:
        prompts: dict[str, str] = {}
        for category, path in self._paths():
            if not path.is_file():
                logger.warning("prompt_file_not_found", category=category, path=str(path))
                continue
            try:
                prompts[category] = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(
                    "prompt_file_unreadable",
                    category=category,
                    path=str(path),
                    error=str(exc),
                )
        return prompts
