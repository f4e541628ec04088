"""Project record model."""

import math

from ..errors import InvalidInputError


class Project:
    """
    A managed project record.

    Projects are identified by name alone: two projects with the same name
    compare equal and hash the same regardless of area or cost. The natural
    ordering is by cost ascending; use ``Project.by_name`` as a sort key for
    alphabetical ordering.

    Every setter re-validates its value, so a failed assignment leaves the
    project unchanged.
    """

    __slots__ = ("_name", "_area", "_cost")

    def __init__(self, name: str, area: str, cost: float):
        self._name = self._validate_text(name, "Name")
        self._area = self._validate_text(area, "Area")
        self._cost = self._validate_cost(cost)

    @staticmethod
    def _validate_text(value: str, field: str) -> str:
        if not isinstance(value, str) or not value:
            raise InvalidInputError(f"{field} cannot be empty")
        return value

    @staticmethod
    def _validate_cost(value: float) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidInputError("Cost must be a number")
        cost = float(value)
        if math.isnan(cost):
            raise InvalidInputError("Cost must be a number")
        if cost < 0:
            raise InvalidInputError("Cost cannot be negative")
        return cost

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = self._validate_text(value, "Name")

    @property
    def area(self) -> str:
        return self._area

    @area.setter
    def area(self, value: str) -> None:
        self._area = self._validate_text(value, "Area")

    @property
    def cost(self) -> float:
        return self._cost

    @cost.setter
    def cost(self, value: float) -> None:
        self._cost = self._validate_cost(value)

    @staticmethod
    def by_name(project: "Project") -> str:
        """Sort key for alphabetical ordering."""
        return project.name

    def copy(self) -> "Project":
        """Return an independent copy of this project."""
        return Project(self._name, self._area, self._cost)

    def to_dict(self) -> dict:
        return {"name": self._name, "area": self._area, "cost": self._cost}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    # Ordering compares cost only, so it is independent of name equality.
    def __lt__(self, other: "Project") -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._cost < other._cost

    def __le__(self, other: "Project") -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._cost <= other._cost

    def __gt__(self, other: "Project") -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._cost > other._cost

    def __ge__(self, other: "Project") -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._cost >= other._cost

    def __str__(self) -> str:
        return f"Project{{name='{self._name}', area='{self._area}', cost={self._cost:.2f}}}"

    def __repr__(self) -> str:
        return f"Project(name={self._name!r}, area={self._area!r}, cost={self._cost!r})"
