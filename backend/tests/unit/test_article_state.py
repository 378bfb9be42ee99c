"""Unit tests for the ArticleState capability and its label registry."""

from dataclasses import dataclass

import pytest

from articles.domain.entities import (
    ArchivedState,
    ArticleState,
    DraftState,
    PublishedState,
    article_state_from_label,
    register_article_state,
    registered_article_states,
)
from articles.domain.exceptions import InvalidArticleStateError


@register_article_state
@dataclass(frozen=True)
class InReviewState(ArticleState):
    def state(self) -> str:
        return "in_review"


def test_builtin_states_have_labels():
    assert DraftState().state() == "draft"
    assert PublishedState().state() == "published"
    assert ArchivedState().state() == "archived"


def test_every_registered_state_has_non_empty_label():
    for label in registered_article_states():
        assert article_state_from_label(label).state() == label
        assert label


def test_registered_states_include_builtins_and_extensions():
    labels = registered_article_states()
    assert {"draft", "published", "archived", "in_review"} <= set(labels)
    assert labels == sorted(labels)


def test_state_from_label_returns_equal_instances():
    assert article_state_from_label("in_review") == InReviewState()
    assert article_state_from_label("draft") == DraftState()


def test_unknown_label_is_rejected():
    with pytest.raises(InvalidArticleStateError) as exc_info:
        article_state_from_label("limbo")
    assert exc_info.value.label == "limbo"


def test_duplicate_label_is_rejected():
    @dataclass(frozen=True)
    class AnotherDraft(ArticleState):
        def state(self) -> str:
            return "draft"

    with pytest.raises(InvalidArticleStateError):
        register_article_state(AnotherDraft)
    assert article_state_from_label("draft") == DraftState()


def test_reregistering_same_class_is_allowed():
    assert register_article_state(DraftState) is DraftState


def test_empty_label_is_rejected():
    @dataclass(frozen=True)
    class Nameless(ArticleState):
        def state(self) -> str:
            return ""

    with pytest.raises(InvalidArticleStateError):
        register_article_state(Nameless)


def test_state_capability_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ArticleState()


class SubmittedState(ArticleState):
    """Plain-class variant relying on the capability's own equality."""

    def state(self) -> str:
        return "submitted"


register_article_state(SubmittedState)


def test_plain_class_variant_compares_by_label():
    assert article_state_from_label("submitted") == article_state_from_label("submitted")
    assert hash(article_state_from_label("submitted")) == hash(SubmittedState())
    assert article_state_from_label("submitted") != DraftState()


def test_variant_with_constructor_arguments_is_rejected():
    class ScheduledState(ArticleState):
        def __init__(self, when: str):
            self.when = when

        def state(self) -> str:
            return "scheduled"

    with pytest.raises(InvalidArticleStateError) as exc_info:
        register_article_state(ScheduledState)
    assert exc_info.value.label == "ScheduledState"
    assert "scheduled" not in registered_article_states()
