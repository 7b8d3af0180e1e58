"""Historical days transcribed from the tracking spreadsheet."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HistoricalDay:
    """One spreadsheet row: foods per meal slot plus workout and sleep."""

    date: str
    is_compliant: bool
    foods: dict[str, list[str]] = field(default_factory=dict)
    workout: tuple[bool, str, str] = (False, "N/A", "N/A")
    sleep: tuple[str, str, str] = ("", "", "")
    observations: str = ""


HISTORICAL_DAYS: list[HistoricalDay] = [
    # Week 262-B: non-compliant days
    HistoricalDay(
        date="2026-01-06",
        is_compliant=False,
        foods={
            "breakfast": [
                "1 Slice sourdough",
                "1 egg + 2 egg whites",
                "1 slice cheese",
            ],
            "midMorning": [
                "Rice, Daal, Salad (cucumber, Onion, Tomato, Tuna, Ham Napoli, "
                "Mushrooms, Pumpkin Seed, Sunflower Seed"
            ],
            "tea": [
                "1 Chicken breast, Salad (Lettuce, Cucumber, Onion, Tomato, Feta, "
                "Hemp, Hearts, Sunflower, Pumpkin Seed, Sunflower Seed, Baby spinach"
            ],
            "dinner": ["2 squares of 85% Dark Chocolate, 3 slices of cheese"],
        },
        sleep=("10:00:00", "", "17:00:00"),
        observations=(
            "Started the day late, meals got pushed out and did workout. "
            "Need to plan day earlier."
        ),
    ),
    HistoricalDay(
        date="2026-01-07",
        is_compliant=False,
        foods={
            "breakfast": [
                "Coffee with cream, Scrambled Omelette (1/2 a",
                "Tomato, 1/2 jalapenos, 1 egg + 2 egg whites, 1 slice mushroom",
            ],
            "midMorning": ["1 party, 3 jalapeños, 2 waffles"],
            "lunch": [
                "Rice, Salad, (Tuna, Salad, broccoli, Courgette, Kidney beans, "
                "cilantro, sunflower seeds, pumpkin seeds, 1/2 chipote pepper, "
                "1 baby yogurt, 4 baby spinach"
            ],
            "dinner": ["200g chicken, chicken broth soup"],
            "supper": [
                "1.5 low mashi seeds, Scrambled Omelette (1/2 a Tomato, Onion, "
                "Spinach, 2 Mushrooms, 1 egg + 2 egg whites"
            ],
        },
        sleep=("10:00:00", "", "2:00:30"),
        observations=(
            "Started the day late again, getting towards the end of the day. "
            "Need to start day earlier, need to prep food for ingredients in advance"
        ),
    ),
    HistoricalDay(
        date="2026-01-08",
        is_compliant=False,
        foods={
            "breakfast": [
                "1 Slice sourdough, Onion, Spinach, 2 Mushrooms, 1 egg + 2 egg whites"
            ],
            "midMorning": [
                "5 almonds, 1 cup Pomegranate",
                "Salad (1/2 can chickpea, 1/2 tomato, lettuce, 1/2 onion, "
                "1/2 avocado, 1/2 cucumber)",
            ],
            "dinner": ["1.5 cup Tow yum chop, 1 big chilli ari fried chicken"],
        },
        sleep=("11:00:00", "", "2:00:30"),
        observations=(
            "Almost got a workout in but had a family emergency to attend. "
            "Not happy with sleeping late as well"
        ),
    ),
    HistoricalDay(
        date="2026-01-09",
        is_compliant=False,
        foods={
            "breakfast": [
                "1 egg + 2 egg whites, Salad (lettuce, onion, 1/4 cucumber, and a sm "
                "of chickpea, sunflower seeds, pumpkin seeds, 5 almonds, 2 walnuts, "
                "2 strawberries"
            ],
            "tea": [
                "2 slices sourdough toast, yogurt spread (1.5 blackberries, "
                "peanut butter, cinnamon, mini 1/2kg smoked salmon"
            ],
        },
        sleep=("11:00:00", "", "4:00:30"),
        observations=(
            "Woke up late so combined with lunch and ate three meals. "
            "Better for macro tracking"
        ),
    ),
    HistoricalDay(
        date="2026-01-10",
        is_compliant=False,
        foods={
            "breakfast": ["1 Slice sourdough, 1 egg + 2 egg whites, 1 slice mushroom"],
            "midMorning": [
                "5 almonds, 1 walnut",
                "Stir Fry vegetables (mushroom, carrot, bell peppers, chickpea",
            ],
            "tea": ["1 cup miso soup with greaser, 1 bass fillet"],
        },
        sleep=("11:00:00", "", "2:00:30"),
        observations="Went to David's for dinner but didn't eat cheat meal",
    ),
    HistoricalDay(
        date="2026-01-11",
        is_compliant=False,
        foods={
            "breakfast": ["Salad, Ladyfish, 5 almonds, 2 walnuts"],
            "midMorning": [
                "2 bowls of rice and sour soup, 2 bass chicken breast, "
                "sliced chicken, 7 bass chicken pakora"
            ],
            "lunch": ["Manchurian chicken, 1 chicken pakora"],
            "dinner": ["1/2 cup rice, 2 pieces of lamb shoulder, 1 sambe, 1 Dosa"],
        },
        sleep=("12:00:00", "", "5:00:30"),
        observations="Cheat day",
    ),
    HistoricalDay(
        date="2026-01-12",
        is_compliant=False,
        foods={
            "breakfast": [
                "1 egg + 2 egg whites + 1 slice sourdough",
                "1 sliced fish soup, 1 slice of hearts, tomfalis, 1 bowl smoked salmon",
            ],
            "lunch": [
                "1 bowl kidney beans, Salad (lettuce, onion, cucumber, avocado, "
                "sunflower seeds, pumpkin seeds, chickpeas, cranberries"
            ],
            "tea": ["2 oranges"],
            "dinner": [
                "1 bowl fish soup, 2 slices of hearts, tomfalis, 1 bowl smoked salmon"
            ],
            "supper": ["3 pieces dark chocolate"],
        },
        sleep=("1:00:00", "", "2:30:30"),
    ),
    # Compliant days
    HistoricalDay(
        date="2026-01-13",
        is_compliant=True,
        foods={
            "earlyMorning": [
                "Stir Fry vegetables (bell pepper, onion), 1 egg + 2 egg whites"
            ],
            "breakfast": ["3 free whites"],
            "midMorning": ["Patch paneer, Salad"],
            "tea": ["200g chicken, vegetable soup"],
        },
        workout=(True, "80", "60"),
        sleep=("7:00:00", "", ""),
    ),
    HistoricalDay(
        date="2026-01-14",
        is_compliant=True,
        foods={
            "breakfast": [
                "Burrito bowl (lettuce, onion, cucumber, red beans, 1/2 chipotle "
                "pepper, sweet potato crackers, 1 lime yogurt"
            ],
            "midMorning": ["5 almonds, 1 walnut, 1 orange"],
            "lunch": ["Carnie, 100g chicken"],
        },
        workout=(True, "60", "N/A"),
        sleep=("9:00:00", "", "2:30:30"),
    ),
    HistoricalDay(
        date="2026-01-15",
        is_compliant=True,
        foods={
            "breakfast": [
                "Burrito bowl (lettuce, onion, cucumber, red beans, 1/2 chipotle "
                "pepper, sweet potato crackers, 1 lime yogurt"
            ],
            "midMorning": ["5 almonds, 1 walnut, 1 lime yogurt, 1 egg + 2 egg whites"],
            "tea": ["1/4 cup okra, 200g chicken"],
        },
        workout=(True, "60", "N/A"),
        sleep=("10:00:00", "", ""),
    ),
    HistoricalDay(
        date="2026-01-16",
        is_compliant=True,
        foods={
            "earlyMorning": ["1 egg + 2 egg whites, 1 slice sourdough"],
            "breakfast": ["5 almonds, 2 walnuts"],
            "midMorning": [
                "1 lime quinoa, red curry (carrot puree, peas, beans, tomato onion)"
            ],
            "tea": [
                "Salad (cucumber, tomatoes, onion, coriander, 1/2 kilo toned milk "
                "chicken, fish soup (white beans, 1 kgs, 1/2 cup broth)"
            ],
        },
        workout=(True, "60", "N/A"),
        sleep=("10:00:00", "", "2:00:30"),
    ),
    HistoricalDay(
        date="2026-01-17",
        is_compliant=True,
        foods={
            "earlyMorning": [
                "1 egg + 2 egg whites, 1 slice sourdough, "
                "1 pineapple laughing cow light"
            ],
            "breakfast": ["5 almonds, 1 walnut, 1 apple"],
            "midMorning": [
                "Salad (lettuce, cucumber, onion, tomato, dressing, seeds, "
                "1/2 chipotle breast, fish soup (chicken broth)"
            ],
        },
        sleep=("10:00:00", "", ""),
    ),
    HistoricalDay(
        date="2026-01-18",
        is_compliant=True,
        foods={
            "earlyMorning": ["1 Alfredo pats, motor with fries"],
            "breakfast": ["5 almonds, 1 walnut"],
            "midMorning": ["1 small bowl moons, 2 chicken thighs, 1/2 cup rice"],
        },
        sleep=("", "", "1:00:30"),
    ),
    HistoricalDay(
        date="2026-01-19",
        is_compliant=True,
        foods={
            "earlyMorning": ["Falafel Takka burger, Salad"],
            "breakfast": ["1 orange, 5 almonds, 2 walnuts, 2 walnut"],
            "tea": ["200g chicken, vegetable soup"],
            "dinner": ["1 orange, 30 dark chocolate covered acai berry"],
        },
        workout=(True, "60", "N/A"),
        sleep=("", "", "3:00:30"),
        observations="Clean Bulk day",
    ),
]
