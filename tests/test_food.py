import pytest

from calorietrack.food import (
    Category,
    Food,
    names_equal,
    parse_category,
    prompt_calories,
    prompt_category,
    prompt_name,
    to_lower,
)


def _scripted(answers):
    remaining = iter(answers)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(remaining)

    return ask, prompts


def test_to_lower_keeps_non_letters():
    assert to_lower("Brown RICE 2%") == "brown rice 2%"


def test_names_equal():
    assert names_equal("Apple", "aPPLE")
    assert not names_equal("apple", "pear")


@pytest.mark.parametrize(
    "text, category",
    [
        ("s", Category.STAPLE_FOOD),
        ("A", Category.ANIMAL_PROTEINS),
        ("v", Category.VEGETABLES),
        ("Fruits", Category.FRUITS),
        ("b", Category.BEVERAGES),
    ],
)
def test_parse_category(text, category):
    assert parse_category(text) is category


@pytest.mark.parametrize("text", ["", "x", "1"])
def test_parse_category_rejects(text):
    with pytest.raises(ValueError):
        parse_category(text)


@pytest.mark.parametrize(
    "letter, full_name",
    [
        ("S", "Staple Food"),
        ("A", "Animal Proteins"),
        ("V", "Vegetables"),
        ("F", "Fruits"),
        ("B", "Beverages"),
    ],
)
def test_full_names_match_source(letter, full_name):
    assert parse_category(letter).full_name == full_name
    assert Food.from_line(f"x,1,{letter}").category_full == full_name


def test_from_line_lowercases_name():
    food = Food.from_line("Rice,116,S")
    assert food == Food("rice", 116.0, Category.STAPLE_FOOD)
    assert food.category_full == "Staple Food"
    assert food.lookup_name == "rice"


def test_from_line_blank_is_none():
    assert Food.from_line("") is None


@pytest.mark.parametrize("line", ["rice,abc,S", "rice,100", "rice,100,"])
def test_from_line_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        Food.from_line(line)


def test_to_line_format():
    assert Food("apple", 52.0, Category.FRUITS).to_line() == "apple,52,F"


@pytest.mark.parametrize(
    "food",
    [
        Food("apple", 52.0, Category.FRUITS),
        Food("green tea", 1.5, Category.BEVERAGES),
        Food("beef", 250.0, Category.ANIMAL_PROTEINS),
    ],
)
def test_line_round_trip(food):
    assert Food.from_line(food.to_line()) == food


def test_sort_key_orders_by_category_letter():
    foods = [
        Food("kale", 49.0, Category.VEGETABLES),
        Food("rice", 116.0, Category.STAPLE_FOOD),
        Food("beef", 250.0, Category.ANIMAL_PROTEINS),
    ]
    ordered = sorted(foods, key=Food.sort_key)
    assert [f.name for f in ordered] == ["beef", "rice", "kale"]


def test_describe():
    text = Food("apple", 52.0, Category.FRUITS).describe()
    assert text.splitlines() == [
        "Category: Fruits",
        "Food name: apple",
        "Calories per 100g (kcal/100g): 52",
    ]


def test_is_in_ignores_case():
    foods = [Food("Apple", 52.0, Category.FRUITS)]
    assert Food("apple", 1.0, Category.FRUITS).is_in(foods)
    assert not Food("pear", 1.0, Category.FRUITS).is_in(foods)


def test_prompt_category_retries():
    ask, prompts = _scripted(["x", "v"])
    written = []
    assert prompt_category(ask, written.append) is Category.VEGETABLES
    assert written == ["invalid input, please just input a character!\n"]
    assert len(prompts) == 2


def test_prompt_name_lowercases():
    ask, _ = _scripted(["Green Tea"])
    assert prompt_name(ask, lambda text: None) == "green tea"


def test_prompt_calories_retries_until_valid():
    ask, _ = _scripted(["-1", "abc", "52.5"])
    written = []
    assert prompt_calories(ask, written.append) == 52.5
    assert written == ["Please input positive number!\n"] * 2


def test_prompt_calories_accepts_zero():
    ask, _ = _scripted(["0"])
    assert prompt_calories(ask, lambda text: None) == 0.0