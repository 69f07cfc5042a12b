class MockPromptStore:
    """In-memory store that counts how often the engine asks for its templates."""

    def __init__(self, prompts: dict[str, str] | None = None) -> None:
        self.prompts = dict(prompts or {'greeting': 'Hi {{name}}!'})
        self.loads = 0

    def load_all(self) -> dict[str, str]:
        self.loads += 1
        return dict(self.prompts)
