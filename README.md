# calorietrack

A small interactive console program for keeping a daily food diary. You
describe yourself once (name, age, gender, height, weight), then log what you
eat. The program keeps a food database of calories per 100 g, records every
meal with its date, and shows how today's intake compares with common daily
recommendations.

## Installing

```
pip install .
```

## Running

```
calorietrack [DIRECTORY]
```

`DIRECTORY` is where the data files live; it defaults to the current
directory. The files are plain CSV and text:

- `user.csv` – your profile
- `food_database.csv` – known foods with calories per 100 g and a category
- `diet_records.csv` – every meal you have logged
- `daily_report.txt` – the latest nutritional report

On first start you are asked for your profile, which is saved straight away.
After that the main menu offers:

1. **Configure Profile** – change name, age, gender, height or weight; the
   profile is saved when you choose *Save&Quit* in that menu.
2. **Log Meals** – pick a category (Staple Food, Animal Proteins, Vegetables,
   Fruits, Beverages), name the food and give its weight in grams. A food not
   yet in the database is added after you enter its calories per 100 g.
3. **Nutritional Insights** – today's energy intake against your estimated
   daily need, plus totals for staple food, animal proteins, vegetables,
   fruits and dairy (foods whose name contains "milk" or "yogurt"). The
   report is also written to `daily_report.txt`.
4. **View Meal History** – list the meals of a date given as `yyyy/mm/dd`,
   grouped by category.
5. **Save&Exit** – write the food database and meal records back to disk.

Meals and new foods are only written to disk when you choose *Save&Exit*.
Ending input (Ctrl-D) or pressing Ctrl-C leaves without saving them.

## Using it from Python

The modules can be used on their own:

- `calorietrack.database` – `Database`, a list of records kept in a CSV file
  with a header line (`load`, `save`, `append`, `find`, `find_all`, `in`),
  and `NoResultError`, raised when no record has the requested name.
- `calorietrack.food` – `Food`, `Category` and the prompts for a new food.
- `calorietrack.diet_record` – `DietRecord`, `DailyReport`, `calories_for`
  and `is_dairy`.
- `calorietrack.user` – `User` with `bmi()` and `daily_calories()`, plus
  `load_user` and `save_user`.
- `calorietrack.dates` – the date and time strings shown by the program.
- `calorietrack.menu` – `App`, the interactive program, and `main`.

For example, to build a report from an existing record file:

```python
from pathlib import Path

from calorietrack.database import Database
from calorietrack.diet_record import DailyReport, DietRecord
from calorietrack.user import load_user

records = Database(DietRecord, Path("diet_records.csv"))
records.load()
user = load_user(Path("user.csv"))
if user is not None:
    report = DailyReport.build(records.records(), "2024/5/17")
    print(report.render(user))
```

`App` takes the directory, a function to ask for input and a function to
write output, so it can be driven without a terminal.

Daily energy need is estimated with the Mifflin–St Jeor formula at a light
activity level (factor 1.2).

## Running the tests

```
pip install ".[test]"
pytest
```