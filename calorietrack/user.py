"""The single user's profile: body data, BMI and energy needs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

Ask = Callable[[str], str]
Write = Callable[[str], object]

_HEADER = "Name,Age,Gender,Height,Weight"
_EDIT_MENU = "1.Name 2.Age 3.Gender 4.Height 5.Weight 6.Save&Quit\nEnter command (1-6)\n"


def _number(value: float) -> str:
    return format(value, "g")


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


@dataclass
class User:
    """Name, age, gender (``F`` or ``M``), height in cm and weight in kg."""

    name: str
    age: float
    gender: str
    height: float
    weight: float

    def bmi(self) -> float:
        return self.weight / (self.height / 100) ** 2

    def daily_calories(self) -> float:
        """Daily energy need in kcal at light activity."""
        basic = 10 * self.weight + 6.25 * self.height - 5 * self.age
        if self.gender == "F":
            return 1.2 * (basic - 161)
        return 1.2 * (basic + 5)

    def report(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Age: {_number(self.age)}\n"
            f"Gender: {self.gender}\n"
            f"Height: {_number(self.height)}\n"
            f"Weight: {_number(self.weight)}\n"
            f"BMI: {_number(self.bmi())}\n"
            "Physical status: Normal\n"
        )

    def to_csv(self) -> str:
        return (
            f"{_HEADER}\n{self.name},{_number(self.age)},{self.gender},"
            f"{_number(self.height)},{_number(self.weight)}"
        )

    @classmethod
    def from_csv(cls, text: str) -> User:
        """Parse the header line and the data line written by :meth:`to_csv`."""
        lines = text.splitlines()
        if len(lines) < 2:
            raise ValueError("user record has no data line")
        fields = lines[1].split(",")
        if len(fields) < 5 or not fields[2]:
            raise ValueError(f"malformed user line: {lines[1]!r}")
        return cls(
            name=fields[0],
            age=float(fields[1]),
            gender=fields[2][0],
            height=float(fields[3]),
            weight=float(fields[4]),
        )


def load_user(path: str | Path) -> User | None:
    """Read the user from ``path``; ``None`` if there is no such file."""
    path = Path(path)
    if not path.exists():
        return None
    return User.from_csv(path.read_text(encoding="utf-8"))


def save_user(user: User, path: str | Path) -> None:
    Path(path).write_text(user.to_csv(), encoding="utf-8")


def _prompt_name(ask: Ask) -> str:
    return ask("Name: ")


def _prompt_positive(ask: Ask, write: Write, prompt: str) -> float:
    while True:
        try:
            value = float(_first_token(ask(prompt)))
        except ValueError:
            value = 0.0
        if value > 0 and math.isfinite(value):
            return value
        write("Please enter a positive number!\n")


def _prompt_gender(ask: Ask, write: Write) -> str:
    while True:
        letter = _first_token(ask("Gender(F/M): "))[:1]
        if letter and letter in "FMfm":
            return letter.upper()
        write("Please enter a F or M!\n")


def prompt_user(ask: Ask, write: Write) -> User:
    """Ask for every field of a new profile."""
    write("Enter your personal data:\n")
    name = _prompt_name(ask)
    age = _prompt_positive(ask, write, "Age: ")
    gender = _prompt_gender(ask, write)
    height = _prompt_positive(ask, write, "Height(cm): ")
    weight = _prompt_positive(ask, write, "Weight(kg): ")
    return User(name, age, gender, height, weight)


def edit_user(user: User, ask: Ask, write: Write) -> User:
    """Let the user change fields until "Save&Quit"; return the edited user.

    Saving is left to the caller.
    """
    while True:
        try:
            mode = int(_first_token(ask(_EDIT_MENU)))
        except ValueError:
            mode = 0
        if not 1 <= mode <= 6:
            write("invalid choice!\n")
            continue
        if mode == 1:
            user.name = _prompt_name(ask)
        elif mode == 2:
            user.age = _prompt_positive(ask, write, "Age: ")
        elif mode == 3:
            user.gender = _prompt_gender(ask, write)
        elif mode == 4:
            user.height = _prompt_positive(ask, write, "Height(cm): ")
        elif mode == 5:
            user.weight = _prompt_positive(ask, write, "Weight(kg): ")
        else:
            return user