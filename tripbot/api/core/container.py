# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from tripbot.config import Settings, settings
from tripbot.domain.prompt_store import FilesystemPromptStore
from tripbot.domain.prompts import PromptAssembler
from tripbot.domain.rendering import TemplateEngine


class Container:
    def __init__(self, config: Settings = settings):
        self._store = FilesystemPromptStore(
            base_dir=config.prompts_dir,
            suffix=config.prompt_suffix,
            categories=config.prompt_categories,
        )
        self._engine = TemplateEngine(self._store)
        self._assembler = PromptAssembler(self._engine)

    @property
    def engine(self) -> TemplateEngine:
        return self._engine

    @property
    def assembler(self) -> PromptAssembler:
        return self._assembler


@lru_cache
def get_container():
    return Container()
