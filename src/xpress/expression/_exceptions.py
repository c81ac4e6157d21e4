__all__ = [
    "ArityError",
    "UnboundVariableError",
    "UnknownOperatorError",
    "DuplicateOperatorError",
]

from dataclasses import dataclass

from .ast import Variable


@dataclass(frozen=True, slots=True)
class ArityError(Exception):
    operator: str
    expected: int
    actual: int

    def __str__(self):
        return (
            f"Expected operator {self.operator} to be applied to {self.expected} operands, "
            f"but got {self.actual}"
        )


@dataclass(frozen=True, slots=True)
class UnboundVariableError(Exception):
    variable: Variable
    bound: tuple[str, ...]

    def __str__(self):
        return (
            f"Expected every variable in an expression to have a binding, but variable "
            f"{self.variable.name} was not found among the bound names {list(self.bound)}"
        )


@dataclass(frozen=True, slots=True)
class UnknownOperatorError(Exception):
    name: str
    known: tuple[str, ...]

    def __str__(self):
        return (
            f"Expected the name of a registered operator, but got {self.name}; "
            f"registered operators are {list(self.known)}"
        )


@dataclass(frozen=True, slots=True)
class DuplicateOperatorError(Exception):
    name: str

    def __str__(self):
        return (
            f"Expected each registered operator to have a unique name, but an operator named "
            f"{self.name} is already registered"
        )
