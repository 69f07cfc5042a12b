class InMemoryPromptStore:
    def __init__(self, prompts: dict[str, str] | None = None):
        self._prompts = dict(prompts or {})

    def put(self, category: str, text: str) -> None:
        self._prompts[category] = text

    def remove(self, category: str) -> None:
        self._prompts.pop(category, None)

    def load_all(self) -> dict[str, str]:
        return dict(self._prompts)
