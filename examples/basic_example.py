"""
Basic example of running the guided tour from Python
"""

from guidedtour import TourConfig, default_runner, create_deck, describe_response, Failure


def full_tour():
    """Run every page with headers."""
    print("=== Full Tour ===")
    runner = default_runner()
    completed = runner.run()
    print(f"\n✓ Completed pages: {', '.join(completed)}")


def selected_pages():
    """Run two pages in reverse order, without headers."""
    print("\n=== Selected Pages ===")
    runner = default_runner(TourConfig(show_headers=False, server="backup"))
    runner.run(["concurrency", "enumerations"])


def using_the_values():
    """The page types are ordinary importable values."""
    print("\n=== Using the Values Directly ===")
    deck = create_deck()
    reds = [card for card in deck if card.suit.color() == "red"]
    print(f"Red cards in the deck: {len(reds)}")
    print(describe_response(Failure("Out of cheese.")))


if __name__ == "__main__":
    full_tour()
    selected_pages()
    using_the_values()
