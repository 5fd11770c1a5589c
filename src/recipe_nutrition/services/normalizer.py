"""Ingredient name normalization and similarity scoring."""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from recipe_nutrition.domain.nutrition import Confidence
from recipe_nutrition.domain.vocabulary import DEFAULT_VOCABULARY, NormalizerVocabulary

_PARENTHETICAL = re.compile(r"\([^)]*\)?")
_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")
_QUANTITY_TOKEN = re.compile(r"^[\d½¼¾⅓⅔⅛./]+$")
_SIBILANT_STEM = re.compile(r"(?:[sxz]|[sc]h)$")
_MAX_PASSES = 6

HIGH_SIMILARITY = 0.9
MEDIUM_SIMILARITY = 0.6


@dataclass
class IngredientNameNormalizer:
    """Turns free-text ingredient names into stable matching keys."""

    vocabulary: NormalizerVocabulary = field(default=DEFAULT_VOCABULARY)

    def __post_init__(self) -> None:
        keys = sorted(self.vocabulary.synonyms, key=lambda key: (-len(key), key))
        self._synonym_pattern = (
            re.compile(r"\b(?:" + "|".join(re.escape(key) for key in keys) + r")\b")
            if keys
            else None
        )
        self._max_phrase_words = max(
            (
                len(phrase.split())
                for phrase in self.vocabulary.modifiers | self.vocabulary.preparations
            ),
            default=1,
        )

    def normalize(self, raw_name: str) -> str:
        """Return the canonical matching key for an ingredient name.

        The stage pipeline is repeated until it reaches a fixed point, which
        makes the result idempotent even when a later stage exposes text an
        earlier stage would have rewritten.
        """
        current = raw_name or ""
        for _ in range(_MAX_PASSES):
            normalized = self._normalize_once(current)
            if normalized == current:
                break
            current = normalized
        return current

    def surface_key(self, raw_name: str) -> str:
        """Return a lightly cleaned name that keeps descriptive words.

        Only casing, asides, punctuation, leading quantities and plurals are
        normalized; size, preparation and form words are kept.
        """
        text = self._clean(raw_name or "")
        return self._normalize_plurals(text)

    def similarity(self, name_a: str, name_b: str) -> float:
        """Score how alike two ingredient names are, from 0.0 to 1.0."""
        norm_a = self.normalize(name_a)
        norm_b = self.normalize(name_b)
        if norm_a == norm_b:
            return 1.0
        if not norm_a or not norm_b:
            return 0.0
        if norm_a in norm_b or norm_b in norm_a:
            shorter, longer = sorted((norm_a, norm_b), key=len)
            return len(shorter) / len(longer)
        words_a = set(norm_a.split())
        words_b = set(norm_b.split())
        union = words_a | words_b
        if not union:
            return 0.0
        return len(words_a & words_b) / len(union)

    @staticmethod
    def match_confidence(similarity: float) -> Confidence:
        """Map a similarity score onto a confidence band."""
        if similarity >= HIGH_SIMILARITY:
            return Confidence.HIGH
        if similarity >= MEDIUM_SIMILARITY:
            return Confidence.MEDIUM
        return Confidence.LOW

    def group_by_normalized_name(self, names: Iterable[str]) -> dict[str, list[str]]:
        """Group raw names by their normalized key, keeping input order."""
        groups: dict[str, list[str]] = {}
        for name in names:
            groups.setdefault(self.normalize(name), []).append(name)
        return groups

    def find_potential_duplicates(self, names: Iterable[str]) -> dict[str, list[str]]:
        """Return only the groups that contain two or more names."""
        return {
            key: members
            for key, members in self.group_by_normalized_name(names).items()
            if len(members) >= 2
        }

    def _normalize_once(self, text: str) -> str:
        text = self._normalize_plurals(self._clean(text))
        text = self._apply_synonyms(text)
        text = self._strip_phrases(text, self.vocabulary.modifiers)
        text = self._strip_phrases(text, self.vocabulary.preparations)
        text = self._strip_form_words(text)
        return self._normalize_plurals(text)

    @staticmethod
    def _clean(text: str) -> str:
        text = text.lower().strip()
        text = _PARENTHETICAL.sub(" ", text)
        text = text.split(",", 1)[0]
        text = text.replace("-", " ")
        tokens = text.split()
        while tokens and _QUANTITY_TOKEN.match(tokens[0]):
            tokens.pop(0)
        text = _PUNCTUATION.sub("", " ".join(tokens))
        return _WHITESPACE.sub(" ", text).strip()

    def _apply_synonyms(self, text: str) -> str:
        if self._synonym_pattern is None or not text:
            return text
        synonyms = self.vocabulary.synonyms
        return self._synonym_pattern.sub(lambda match: synonyms[match.group(0)], text)

    def _strip_phrases(self, text: str, phrases: frozenset[str]) -> str:
        words = text.split()
        kept: list[str] = []
        index = 0
        while index < len(words):
            for size in range(min(self._max_phrase_words, len(words) - index), 0, -1):
                if " ".join(words[index : index + size]) in phrases:
                    index += size
                    break
            else:
                kept.append(words[index])
                index += 1
        if not kept:
            return text
        return " ".join(kept)

    def _strip_form_words(self, text: str) -> str:
        words = text.split()
        form_words = self.vocabulary.form_words
        kept = [word for word in words if word not in form_words]
        if not kept:
            return text
        return " ".join(kept)

    def _normalize_plurals(self, text: str) -> str:
        return " ".join(self._singularize(word) for word in text.split())

    def _singularize(self, word: str) -> str:  # noqa: PLR0911
        if word in self.vocabulary.plural_invariants:
            return word
        irregular = self.vocabulary.irregular_plurals.get(word)
        if irregular is not None:
            return irregular
        if word.endswith("ies") and len(word) > 4:
            return word[:-3] + "y"
        if word.endswith("oes") and len(word) > 4:
            return word[:-2]
        if word.endswith("es") and len(word) > 3:
            stem = word[:-2]
            if _SIBILANT_STEM.search(stem):
                return stem
        if word.endswith("s") and len(word) > 2 and not word.endswith("ss"):
            return word[:-1]
        return word
