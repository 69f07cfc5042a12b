# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class PromptError(RuntimeError):
    """Base class for prompt loading and rendering failures."""
    pass


class TemplateNotFound(PromptError, LookupError):
    """Raised when a render is requested for an unregistered category."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Prompt template not found: {category}")
