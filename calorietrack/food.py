"""Foods with their energy per 100 g and their category."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Iterable

Ask = Callable[[str], str]
Write = Callable[[str], object]


class Category(Enum):
    """Food category, keyed by its one-letter code."""

    STAPLE_FOOD = "S"
    ANIMAL_PROTEINS = "A"
    VEGETABLES = "V"
    FRUITS = "F"
    BEVERAGES = "B"

    @property
    def full_name(self) -> str:
        return _FULL_NAMES[self]


_FULL_NAMES = {
    Category.STAPLE_FOOD: "Staple Food",
    Category.ANIMAL_PROTEINS: "Animal Proteins",
    Category.VEGETABLES: "Vegetables",
    Category.FRUITS: "Fruits",
    Category.BEVERAGES: "Beverages",
}


def _number(value: float) -> str:
    return format(value, "g")


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def to_lower(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return "".join(c.lower() if c.isascii() and c.isalpha() else c for c in text)


def names_equal(a: str, b: str) -> bool:
    """Compare two names ignoring letter case."""
    return to_lower(a) == to_lower(b)


def parse_category(text: str) -> Category:
    """Return the category named by the first character of ``text``."""
    if not text:
        raise ValueError("empty category")
    try:
        return Category(text[0].upper())
    except ValueError:
        raise ValueError(f"unknown category {text[0]!r}") from None


@dataclass(frozen=True)
class Food:
    """A food, its energy in kcal per 100 g, and its category."""

    HEADER: ClassVar[str] = "Food Name,Calories(Kcal/100g),Category"

    name: str
    unit_calories: float
    category: Category

    @classmethod
    def from_line(cls, line: str) -> Food | None:
        """Parse a CSV line; return ``None`` for a blank line."""
        if not line:
            return None
        fields = line.split(",")
        if len(fields) < 3 or not fields[2]:
            raise ValueError(f"malformed food line: {line!r}")
        return cls(to_lower(fields[0]), float(fields[1]), Category(fields[2][0]))

    def to_line(self) -> str:
        return f"{self.name},{_number(self.unit_calories)},{self.category.value}"

    @property
    def lookup_name(self) -> str:
        return self.name

    @property
    def category_full(self) -> str:
        return self.category.full_name

    def sort_key(self) -> str:
        return self.category.value

    def describe(self) -> str:
        return (
            f"Category: {self.category_full}\n"
            f"Food name: {self.name}\n"
            f"Calories per 100g (kcal/100g): {_number(self.unit_calories)}\n"
        )

    def is_in(self, foods: Iterable[Food]) -> bool:
        """Tell whether a food of the same name, in any case, is among ``foods``."""
        return any(names_equal(other.name, self.name) for other in foods)


def prompt_category(ask: Ask, write: Write) -> Category:
    """Ask until a valid category letter is given."""
    prompt = (
        "Select a category (S/A/V/F/B: Staple Food/Animal proteins/"
        "Vegetables/Fruits/Beverages): "
    )
    while True:
        try:
            return parse_category(_first_token(ask(prompt)))
        except ValueError:
            write("invalid input, please just input a character!\n")


def prompt_name(ask: Ask, write: Write) -> str:
    """Ask for a food name and return it in lower case."""
    return to_lower(ask("Food name: "))


def prompt_calories(ask: Ask, write: Write) -> float:
    """Ask until a non-negative energy per 100 g is given."""
    while True:
        try:
            value = float(_first_token(ask("Enter calories per 100g (kcal/100g): ")))
        except ValueError:
            value = -1.0
        if value >= 0 and math.isfinite(value):
            return value
        write("Please input positive number!\n")