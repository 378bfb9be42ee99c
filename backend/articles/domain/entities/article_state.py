"""Article lifecycle states — an open capability, not a closed state machine.

Every state exposes a single ``state()`` query returning its label. New variants
are added with ``@register_article_state`` and can then be resolved by label.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from articles.domain.exceptions import InvalidArticleStateError


class ArticleState(ABC):
    """Capability implemented by every article state variant."""

    @abstractmethod
    def state(self) -> str:
        """Return the textual label identifying this state."""
        ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArticleState):
            return NotImplemented
        return type(self) is type(other) and self.state() == other.state()

    def __hash__(self) -> int:
        return hash((type(self), self.state()))


_REGISTRY: dict[str, type[ArticleState]] = {}


def register_article_state(cls: type[ArticleState]) -> type[ArticleState]:
    """Class decorator adding a state variant to the label registry."""
    try:
        label = cls().state()
    except TypeError:
        raise InvalidArticleStateError(
            cls.__name__, "variant must be constructible without arguments"
        ) from None
    if not label:
        raise InvalidArticleStateError(label, "label must not be empty")
    existing = _REGISTRY.get(label)
    if existing is not None and existing is not cls:
        raise InvalidArticleStateError(label, f"already registered by {existing.__name__}")
    _REGISTRY[label] = cls
    return cls


def article_state_from_label(label: str) -> ArticleState:
    """Build a state instance from its label."""
    cls = _REGISTRY.get(label)
    if cls is None:
        raise InvalidArticleStateError(label, "unknown state")
    return cls()


def registered_article_states() -> list[str]:
    return sorted(_REGISTRY)


@register_article_state
@dataclass(frozen=True)
class DraftState(ArticleState):
    """Article is being written and not visible to readers."""

    def state(self) -> str:
        return "draft"


@register_article_state
@dataclass(frozen=True)
class PublishedState(ArticleState):
    def state(self) -> str:
        return "published"


@register_article_state
@dataclass(frozen=True)
class ArchivedState(ArticleState):
    def state(self) -> str:
        return "archived"
