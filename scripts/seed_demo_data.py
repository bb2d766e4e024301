import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../')))

from core.repositories import (
    DailyStatsRepository,
    GoalRepository,
    LanguageRepository,
    UserQuoteRepository,
    WellnessRepository,
)
from core.store import open_default_store


def seed_demo_data():
    print("Seeding demo data...")
    store = open_default_store()

    # 1. Goals
    goals = GoalRepository(store)
    if not goals.list_goals():
        goals.add_goal("Finish the REST API tutorial", "high")
        goals.add_goal("Refactor the auth module", "medium")
        done = goals.add_goal("Set up pre-commit hooks", "low")
        if done:
            goals.toggle_goal(done.id)
        print("✅ Added 3 coding goals")

    # 2. Languages
    languages = LanguageRepository(store)
    if not languages.list_languages():
        for name, progress in (("Python", 70), ("TypeScript", 40), ("Rust", 10)):
            lang = languages.add_language(name)
            if lang:
                languages.update_progress(lang.id, progress)
        print("✅ Added 3 languages")

    # 3. Coding hours and wellness
    DailyStatsRepository(store).add_coding_hours(2.5)
    wellness = WellnessRepository(store)
    if not wellness.list_activities():
        wellness.add_activity("walk", 30, 8, "Lunch walk")
        wellness.add_activity("meditation", 10, 7)
        print("✅ Added 2 wellness activities")

    # 4. A personal quote
    quotes = UserQuoteRepository(store)
    if not quotes.list_quotes():
        quotes.add_quote("Make it work, make it right, make it fast.", "Kent Beck", "craft, programming")
        print("✅ Added 1 personal quote")

    print("\nDemo data ready. Refresh the dashboard to see it.")


if __name__ == "__main__":
    seed_demo_data()
