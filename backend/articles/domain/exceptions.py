"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidArticleStateError(Exception):
    """Raised when a state label cannot be registered or resolved."""

    def __init__(self, label: str, reason: str):
        self.label = label
        self.reason = reason
        super().__init__(f"Invalid article state '{label}': {reason}")


class ArticleNotPersistedError(Exception):
    """Raised when an operation needs a stored article but got a transient one."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Article '{title}' has not been persisted (no id assigned)")
