"""Meal records and the daily nutrition report built from them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterable

from calorietrack.dates import read_date
from calorietrack.food import Category, Food
from calorietrack.user import User

Ask = Callable[[str], str]
Write = Callable[[str], object]

_CATEGORY_BY_FULL_NAME = {category.full_name: category for category in Category}
_RULE = "=" * 70
_THIN_RULE = "-" * 70


def _number(value: float) -> str:
    return format(value, "g")


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def calories_for(weight: float, unit_calories: float) -> float:
    """Energy in kcal of ``weight`` grams of a food with ``unit_calories`` per 100 g."""
    return weight / 100 * unit_calories


def is_dairy(food_name: str) -> bool:
    """Tell whether a food counts as dairy: its name mentions milk or yogurt."""
    return "milk" in food_name or "yogurt" in food_name


def prompt_weight(ask: Ask, write: Write) -> float:
    """Ask until a positive weight in grams is given."""
    while True:
        try:
            value = float(_first_token(ask("Food weight(g): ")))
        except ValueError:
            value = 0.0
        if value > 0 and math.isfinite(value):
            return value
        write("Please input positve number!\n")


@dataclass(frozen=True)
class DietRecord:
    """One eaten portion: its date, food, weight in grams and energy in kcal."""

    HEADER: ClassVar[str] = "Date,Category,Name,Weight(g),Calories(kcal)"

    date: str
    category: Category
    food_name: str
    weight: float
    calories: float

    @classmethod
    def from_food(cls, food: Food, weight: float, date: str | None = None) -> DietRecord:
        """Record ``weight`` grams of ``food`` eaten on ``date`` (today by default)."""
        return cls(
            date=read_date() if date is None else date,
            category=food.category,
            food_name=food.name,
            weight=weight,
            calories=calories_for(weight, food.unit_calories),
        )

    @classmethod
    def from_line(cls, line: str) -> DietRecord | None:
        """Parse a CSV line; return ``None`` for a blank line."""
        if not line:
            return None
        fields = line.split(",")
        if len(fields) < 5:
            raise ValueError(f"malformed diet record line: {line!r}")
        try:
            category = _CATEGORY_BY_FULL_NAME[fields[1]]
        except KeyError:
            raise ValueError(f"unknown category {fields[1]!r}") from None
        return cls(
            date=fields[0],
            category=category,
            food_name=fields[2],
            weight=float(fields[3]),
            calories=float(fields[4]),
        )

    def to_line(self) -> str:
        return (
            f"{self.date},{self.category_full},{self.food_name},"
            f"{_number(self.weight)},{_number(self.calories)}"
        )

    @property
    def lookup_name(self) -> str:
        return self.date

    @property
    def category_full(self) -> str:
        return self.category.full_name

    def sort_key(self) -> str:
        return self.date

    def describe(self) -> str:
        return (
            f"Date: {self.date}\n"
            f"Category: {self.category_full}\n"
            f"Name: {self.food_name}\n"
            f"Weight(g): {_number(self.weight)}\n"
            f"Calories(kcal): {_number(self.calories)}\n"
        )


@dataclass(frozen=True)
class DailyReport:
    """Totals of one day's intake: energy in kcal and weights in grams."""

    date: str
    total_calories: float = 0.0
    staple_food: float = 0.0
    animal_proteins: float = 0.0
    vegetables: float = 0.0
    fruits: float = 0.0
    dairy: float = 0.0

    @classmethod
    def build(cls, records: Iterable[DietRecord], date: str | None = None) -> DailyReport:
        """Sum the records dated ``date`` (today by default)."""
        day = read_date() if date is None else date
        totals = {category: 0.0 for category in Category}
        calories = 0.0
        dairy = 0.0
        for record in records:
            if record.date != day:
                continue
            calories += record.calories
            totals[record.category] += record.weight
            if is_dairy(record.food_name):
                dairy += record.weight
        return cls(
            date=day,
            total_calories=calories,
            staple_food=totals[Category.STAPLE_FOOD],
            animal_proteins=totals[Category.ANIMAL_PROTEINS],
            vegetables=totals[Category.VEGETABLES],
            fruits=totals[Category.FRUITS],
            dairy=dairy,
        )

    def render(self, user: User) -> str:
        """Return the report text for ``user``."""
        return (
            f"{_RULE}\n"
            f"Daily Diet Analysis Report({self.date})\n"
            f"{_THIN_RULE}\n"
            f"{user.report()}"
            "\n"
            "Nutritional Intake Profile (Daily Recommandation in Parentheses) : \n"
            f"Food Energy Intake: {_number(self.total_calories)} "
            f"({_number(user.daily_calories())}kcal)\n"
            f"Staple Food: {_number(self.staple_food)} (200-300g)\n"
            f"Animal Proteins: {_number(self.animal_proteins)} (120-200g)\n"
            f"Vegetables: {_number(self.vegetables)} (300-500g)\n"
            f"Fruits: {_number(self.fruits)} (200-350g)\n"
            f"Dairy: {_number(self.dairy)} (300g)\n"
            f"{_RULE}\n"
        )