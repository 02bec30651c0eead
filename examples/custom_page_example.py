"""
Registering an extra page on the standard tour
"""

import logging

from guidedtour import Circle, Square, TourConfig, default_runner


def area_table(config: TourConfig):
    """Print areas for a few sizes."""
    for size in (1, 2.5, 5):
        square = Square(side_length=size, name=f"square {size}")
        circle = Circle(name=f"circle {size}", radius=size)
        print(f"  size {size:>4}: square {square.area():8.3f}  circle {circle.area():8.3f}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    runner = default_runner(TourConfig(verbose=True))
    runner.register("areas", "Area Table", area_table)
    runner.run(["classes", "areas"])
