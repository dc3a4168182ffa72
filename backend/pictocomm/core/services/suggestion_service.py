"""Next-category prediction.

After every tap the board foregrounds the category the user most likely needs
next. Three rule tiers are consulted in order and the first one that reaches a
decision wins:

1. word rules keyed by the text of the last token;
2. contextual rules keyed by the categories of the last two tokens, optionally
   refined by the last token's text;
3. a default successor for the last token's category.

A tier can also decide that nothing should be suggested (``NO_SUGGESTION``),
which stops evaluation and leaves the current filter alone. All rules are plain
lookup tables so they can be replaced or extended without touching the
evaluation code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from pictocomm.core.models.category import Category
from pictocomm.utils.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from pictocomm.core.models.pictogram import Pictogram

logger = get_logger(__name__)


class Verdict(str, Enum):
    NO_SUGGESTION = "no_suggestion"


NO_SUGGESTION = Verdict.NO_SUGGESTION

# A rule either names a category, explicitly declines (NO_SUGGESTION) or has
# no opinion (None) so the next tier runs.
RuleOutcome = Union[Category, Verdict, None]


@dataclass(frozen=True)
class ContextRule:
    """Outcome for one (previous category, last category) pair."""

    default: RuleOutcome = None
    by_word: Mapping[str, RuleOutcome] = field(default_factory=dict)

    def resolve(self, word: str) -> RuleOutcome:
        if word in self.by_word:
            return self.by_word[word]
        return self.default


WORD_RULES: dict[str, Category] = {
    # Movement and rest point at places
    "voy": Category.PLACE,
    "ir al bano": Category.PLACE,
    "ir al baño": Category.PLACE,
    "dormir": Category.PLACE,
    # Food and drink
    "comer": Category.THING,
    "beber": Category.THING,
    "hambre": Category.THING,
    "sed": Category.THING,
    # Entertainment
    "jugar": Category.THING,
    "ver": Category.THING,
    "escuchar": Category.THING,
}

CONTEXT_RULES: dict[tuple[Category, Category], ContextRule] = {
    (Category.PERSON, Category.ACTION): ContextRule(
        default=Category.THING,
        by_word={
            "voy": Category.PLACE,
            "comer": Category.THING,
            "beber": Category.THING,
            "jugar": Category.THING,
            "ver": Category.THING,
            "escuchar": Category.THING,
        },
    ),
    (Category.PERSON, Category.QUALITY): ContextRule(
        default=None,
        by_word={
            "hambre": Category.THING,
            "sed": Category.THING,
            "feliz": NO_SUGGESTION,
            "triste": NO_SUGGESTION,
            "enojado/a": NO_SUGGESTION,
            "cansado/a": NO_SUGGESTION,
        },
    ),
    # Core clause complete: offer a time qualifier
    (Category.ACTION, Category.THING): ContextRule(default=Category.TIME),
    (Category.ACTION, Category.PLACE): ContextRule(default=Category.TIME),
}

DEFAULT_SUCCESSORS: dict[Category, Category | None] = {
    Category.PERSON: Category.ACTION,
    Category.ACTION: Category.THING,
    Category.QUALITY: Category.THING,
    Category.THING: Category.TIME,
    Category.PLACE: Category.TIME,
    Category.TIME: None,
}


class SuggestionEngine:
    """Stateless evaluator over the three rule tables."""

    def __init__(
        self,
        word_rules: Mapping[str, RuleOutcome] | None = None,
        context_rules: Mapping[tuple[Category, Category], ContextRule] | None = None,
        default_successors: Mapping[Category, Category | None] | None = None,
    ) -> None:
        self._word_rules = WORD_RULES if word_rules is None else word_rules
        self._context_rules = CONTEXT_RULES if context_rules is None else context_rules
        self._default_successors = DEFAULT_SUCCESSORS if default_successors is None else default_successors

    def word_rule(self, last: Pictogram) -> RuleOutcome:
        return self._word_rules.get(last.normalized_text)

    def context_rule(self, previous: Pictogram | None, last: Pictogram) -> RuleOutcome:
        if previous is None:
            return None
        rule = self._context_rules.get((previous.category, last.category))
        if rule is None:
            return None
        return rule.resolve(last.normalized_text)

    def default_rule(self, last: Pictogram) -> RuleOutcome:
        return self._default_successors.get(last.category)

    def suggest(self, tokens: Sequence[Pictogram]) -> Category | None:
        """Return the category to foreground after the last token, or None to keep the filter."""
        if not tokens:
            return None
        last = tokens[-1]
        previous = tokens[-2] if len(tokens) >= 2 else None

        tiers = (
            ("word", lambda: self.word_rule(last)),
            ("context", lambda: self.context_rule(previous, last)),
            ("default", lambda: self.default_rule(last)),
        )
        for tier, evaluate in tiers:
            outcome = evaluate()
            if outcome is None:
                continue
            logger.debug(
                "Suggestion resolved",
                extra={"tier": tier, "word": last.text, "outcome": getattr(outcome, "value", outcome)},
            )
            if outcome is NO_SUGGESTION:
                return None
            return outcome
        return None


default_engine = SuggestionEngine()


def suggest_next_category(tokens: Sequence[Pictogram], engine: SuggestionEngine | None = None) -> Category | None:
    """Suggest the next category using the bundled rule tables unless ``engine`` is given."""
    return (engine or default_engine).suggest(tokens)
