from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

Scalar = Union[str, float, int, bool]

@dataclass(frozen=True)
class DateCell:
    value: Optional[date]
    col: str

@dataclass(frozen=True)
class LoginValue:
    login: str

@dataclass(frozen=True)
class LoginCell:
    value: Optional[LoginValue]
    row: int

@dataclass(frozen=True)
class OooCommandRange:
    start_date: Optional[date]
    end_date: Optional[date]

    @property
    def complete(self) -> bool:
        return self.start_date is not None and self.end_date is not None

@dataclass(frozen=True)
class TargetCell:
    date_cell: DateCell
    login_cell: LoginCell

    @property
    def coord(self) -> str:
        return f"{self.date_cell.col}{self.login_cell.row}"

@dataclass(frozen=True)
class OldValue:
    merged: bool
    value: Optional[Scalar] = None

@dataclass(frozen=True)
class Outcome:
    status: str  # "success" | "neutral" | "failure"
    message: str

    @classmethod
    def success(cls, message: str) -> "Outcome":
        return cls("success", message)

    @classmethod
    def neutral(cls, message: str) -> "Outcome":
        return cls("neutral", message)

    @classmethod
    def failure(cls, message: str) -> "Outcome":
        return cls("failure", message)
