"""Resource name derivation.

A resource is named once, in singular StudlyCase (``ProductCategory``), and
every other identifier the generated code needs is computed from that name
on demand::

    class name        ProductCategory
    variable          productCategory
    plural variable   productCategories
    table             product_categories
    URI segment       product-categories
    view folder       product_categories
    route name        product-categories
    route parameter   product_category

Multi-word names are pluralised as a whole phrase (only the last word
changes) before the snake/kebab forms are taken.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from crudpack.config import NavResource
from crudpack.errors import ValidationError

RESOURCE_NAME_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")


# ---------------------------------------------------------------------------
# Case helpers
# ---------------------------------------------------------------------------


def studly(value: str) -> str:
    """Convert ``product-category`` / ``product_category`` / ``productCategory`` to ``ProductCategory``."""
    parts = re.split(r"[-_\s]+", value.strip())
    return "".join(word[:1].upper() + word[1:] for word in parts if word)


def camel(value: str) -> str:
    """Convert ``ProductCategory`` to ``productCategory``."""
    pascal = studly(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""


def snake(value: str) -> str:
    """Convert ``ProductCategory`` or ``product-category`` to ``product_category``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def kebab(value: str) -> str:
    """Convert ``ProductCategory`` to ``product-category``."""
    return snake(value).replace("_", "-")


# ---------------------------------------------------------------------------
# Pluralisation
# ---------------------------------------------------------------------------

_UNCOUNTABLE: frozenset[str] = frozenset({
    "audio", "equipment", "feedback", "fish", "information", "metadata",
    "money", "news", "rice", "series", "sheep", "species", "staff",
})

_IRREGULAR: dict[str, str] = {
    "analysis": "analyses",
    "cactus": "cacti",
    "child": "children",
    "crisis": "crises",
    "criterion": "criteria",
    "echo": "echoes",
    "foot": "feet",
    "goose": "geese",
    "half": "halves",
    "hero": "heroes",
    "index": "indices",
    "knife": "knives",
    "leaf": "leaves",
    "life": "lives",
    "man": "men",
    "matrix": "matrices",
    "mouse": "mice",
    "ox": "oxen",
    "person": "people",
    "phenomenon": "phenomena",
    "potato": "potatoes",
    "quiz": "quizzes",
    "shelf": "shelves",
    "thesis": "theses",
    "tomato": "tomatoes",
    "tooth": "teeth",
    "vertex": "vertices",
    "wife": "wives",
    "wolf": "wolves",
    "woman": "women",
}

_PLURAL_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"([^aeiouy])y$"), r"\1ies"),
    (re.compile(r"(ss|sh|ch|x|z|s)$"), r"\1es"),
]

_LAST_WORD = re.compile(r"(?:[A-Z][a-z0-9]+|[A-Z]+|[a-z0-9]+)$")


def pluralize_word(word: str) -> str:
    """Pluralise a single English word, keeping its leading capital."""
    lower = word.lower()
    if lower in _UNCOUNTABLE:
        return word
    if word.isupper() and len(word) > 1:
        return word + "s"

    if lower in _IRREGULAR:
        plural = _IRREGULAR[lower]
    else:
        plural = lower + "s"
        for pattern, replacement in _PLURAL_RULES:
            if pattern.search(lower):
                plural = pattern.sub(replacement, lower)
                break

    if word[:1].isupper():
        return plural[:1].upper() + plural[1:]
    return plural


def plural_studly(value: str) -> str:
    """Pluralise the last word of a StudlyCase phrase: ``ProductCategory`` -> ``ProductCategories``."""
    match = _LAST_WORD.search(value)
    if not match:
        return value
    return value[: match.start()] + pluralize_word(match.group(0))


# ---------------------------------------------------------------------------
# ResourceNames
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResourceNames:
    """All identifiers derived from one validated singular StudlyCase name."""

    name: str

    @property
    def class_name(self) -> str:
        return self.name

    @property
    def variable(self) -> str:
        return camel(self.name)

    @property
    def plural_studly(self) -> str:
        return plural_studly(self.name)

    @property
    def plural_variable(self) -> str:
        return camel(self.plural_studly)

    @property
    def table(self) -> str:
        return snake(self.plural_studly)

    @property
    def uri(self) -> str:
        return kebab(self.plural_studly)

    @property
    def view_folder(self) -> str:
        return snake(self.plural_studly)

    @property
    def route_name(self) -> str:
        # Route names are the URI segment so ``{route}.index`` always matches the URL.
        return self.uri

    @property
    def route_parameter(self) -> str:
        """Implicit-binding parameter Laravel assigns to the resource routes."""
        return snake(self.name)

    @property
    def label(self) -> str:
        """Human readable plural, e.g. ``Product Categories``."""
        return " ".join(part.capitalize() for part in self.table.split("_"))

    def nav_resource(self, soft_deletes: bool) -> NavResource:
        """The navigation config entry matching this resource's route names."""
        return NavResource(label=self.label, route=self.route_name, soft_deletes=soft_deletes)


def derive(raw_name: str) -> ResourceNames:
    """Validate *raw_name* and return its derived identifiers.

    The raw value is first normalised to StudlyCase (``product_category`` and
    ``product-category`` become ``ProductCategory``), then checked against
    ``^[A-Z][A-Za-z0-9]*$``.

    Raises:
        ValidationError: If the normalised name is empty or not StudlyCase.
    """
    name = studly(raw_name or "")
    if not name or not RESOURCE_NAME_PATTERN.match(name):
        raise ValidationError(
            f"Invalid resource name {raw_name!r}. "
            "Use singular StudlyCase like Category or ProductCategory."
        )
    return ResourceNames(name)
