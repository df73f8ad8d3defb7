"""The interactive calorie tracker: profile, meal logging and reports."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, Sequence

from calorietrack.database import Database, NoResultError
from calorietrack.dates import read_all, read_date
from calorietrack.diet_record import DailyReport, DietRecord, prompt_weight
from calorietrack.food import Food, prompt_calories, prompt_category, prompt_name
from calorietrack.user import User, edit_user, load_user, prompt_user, save_user

Ask = Callable[[str], str]
Write = Callable[[str], object]

_MAIN_MENU = (
    "1. Configure Profile 2. Log Meals 3. Nutritional Insights "
    "4. View Meal History 5. Save&Exit\n"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_COLUMNS = (12, 18, 38, 10, 15)


def _number(value: float) -> str:
    return format(value, "g")


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return int(match.group(1))


def _row(cells: Sequence[str]) -> str:
    return "".join(cell.rjust(width) for cell, width in zip(cells, _COLUMNS)) + "\n"


def split_date(text: str) -> list[str]:
    """Split a ``yyyy/mm/dd`` string at its slashes."""
    return text.split("/")


def normalize_date(tokens: Sequence[str]) -> str:
    """Join three numeric parts as ``year/month/day`` without zero padding.

    Any other number of parts gives an empty string; a part that does not
    start with a number raises ``ValueError``.
    """
    if len(tokens) != 3:
        return ""
    return "/".join(str(_leading_int(token)) for token in tokens)


class App:
    """The tracker's state and its menu actions, working on files in ``directory``."""

    def __init__(
        self,
        directory: str | Path = ".",
        ask: Ask = input,
        write: Write = sys.stdout.write,
    ) -> None:
        self.directory = Path(directory)
        self.ask = ask
        self.write = write
        self.user_path = self.directory / "user.csv"
        self.report_path = self.directory / "daily_report.txt"
        self.foods: Database[Food] = Database(Food, self.directory / "food_database.csv")
        self.records: Database[DietRecord] = Database(
            DietRecord, self.directory / "diet_records.csv"
        )
        self.user: User | None = None
        self.today = read_date()

    def run(self) -> None:
        """Start up, then serve the main menu until "Save&Exit"."""
        self.start()
        actions = {
            1: self.configure_profile,
            2: self.log_meal,
            3: self.nutrition_insights,
            4: self.view_meal_history,
        }
        while True:
            try:
                mode = _leading_int(self.ask(_MAIN_MENU))
            except ValueError:
                mode = 0
            if mode in actions:
                actions[mode]()
            elif mode == 5:
                self.save_exit()
                return
            else:
                self.write("invalid input\n")

    def start(self) -> None:
        """Greet, load or create the user, and load the food and meal files."""
        border = "*" * 34
        blank = "*" + " " * 32 + "*"
        self.write(
            f"{border}\n{blank}\n* Welcome to Calorie Track Daily *\n{blank}\n{border}\n"
        )
        user = load_user(self.user_path)
        if user is None:
            user = prompt_user(self.ask, self.write)
            save_user(user, self.user_path)
            self.write("User record saved!\n")
        else:
            self.write(f"Hi {user.name}! Current time: {read_all()}\n")
        self.user = user
        self.foods.load()
        self.records.load()
        self.today = read_date()

    def _require_user(self) -> User:
        if self.user is None:
            raise RuntimeError("no user loaded; call start() first")
        return self.user

    def configure_profile(self) -> None:
        user = edit_user(self._require_user(), self.ask, self.write)
        save_user(user, self.user_path)
        self.write("User record saved!\n")
        self.write("User record has changed!\n")

    def log_meal(self) -> None:
        """Ask for a food and its weight, and record the meal."""
        category = prompt_category(self.ask, self.write)
        name = prompt_name(self.ask, self.write)
        try:
            food = self.foods.find(name)
        except NoResultError:
            self.write(f"{name} is not in the food database.\n")
            calories = prompt_calories(self.ask, self.write)
            food = Food(name, calories, category)
            self.foods.append(food)
            self.write("Food record saved.\n")
        weight = prompt_weight(self.ask, self.write)
        self.records.append(DietRecord.from_food(food, weight, read_date()))
        self.write("Diet record saved.\n")

    def nutrition_insights(self) -> None:
        """Show today's report and write it to ``daily_report.txt``."""
        user = self._require_user()
        try:
            self.records.find_all(self.today)
        except NoResultError:
            self.write("No diets records, please record diets first!\n")
            return
        text = DailyReport.build(self.records, self.today).render(user)
        self.write(text)
        self.report_path.write_text(text, encoding="utf-8")

    def view_meal_history(self) -> None:
        """Show the meals of an entered date, grouped by category."""
        entered = _first_token(self.ask("Enter date (yyyy/mm/dd): "))
        try:
            day = normalize_date(split_date(entered))
        except ValueError:
            self.write("invalid input\n")
            return
        try:
            found = self.records.find_all(day)
        except NoResultError:
            self.write("Can't find aimed date, please check your input!\n")
            return
        found.sort(key=lambda record: record.category.value)
        lines = [_row(("Date", "Category", "Name", "Weight(g)", "Calories(kcal)"))]
        lines.extend(
            _row(
                (
                    record.date,
                    record.category_full,
                    record.food_name,
                    _number(record.weight),
                    _number(record.calories),
                )
            )
            for record in found
        )
        self.write("".join(lines) + "\n")

    def save_exit(self) -> None:
        """Save foods and meals and say goodbye."""
        self.foods.save()
        self.records.save()
        rule = "=" * 70
        name = self.user.name if self.user is not None else ""
        self.write(
            "All datas saved.\n"
            f"{rule}\n\n"
            f"Start Tracking -> Start Shining.  Goodbye, {name} ^_^\n\n"
            f"{rule}\n"
        )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Track daily food intake.")
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding the data files (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        App(args.directory).run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())