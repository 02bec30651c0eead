# src/guidedtour/people.py
"""
Person and Employee, showing overridden methods and derived properties.
"""


class Person:
    """Someone with a name and an age."""

    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def greet(self) -> str:
        return f"Hello I'm {self.name}!"


class Employee(Person):
    """A person with an id and a salary from which tax is derived."""

    TAX_RATE = 0.6

    def __init__(self, name: str, age: int, employee_id: str):
        super().__init__(name, age)
        self.employee_id = employee_id
        self._salary = 0.0

    @property
    def salary(self) -> float:
        return self._salary

    @salary.setter
    def salary(self, value: float):
        self._salary = float(value)

    @property
    def tax(self) -> float:
        """Read-only; recomputed from the current salary."""
        return self._salary * self.TAX_RATE

    def greet(self) -> str:
        return f"{super().greet()} My id is {self.employee_id}"
