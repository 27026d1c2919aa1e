"""Month -- the twelve months of the Persian (Solar Hijri) year."""

from __future__ import annotations

from enum import Enum

from persian_calendar.exceptions import InvalidMonthError


class Month(Enum):
    """
    Persian months.

    Contract:
        Exactly one member per ordinal 1..12. Each member carries its
        ordinal, its maximum day count in a non-leap year, and its display
        names. Esfand gains a 30th day in leap years; that rule lives in
        ``persian_calendar.domain.calendar``, not here.

    Guarantees:
        - Static table; members are never constructed dynamically.
    """

    FARVARDIN = (1, 31, "فروردین", "Farvardin")
    ORDIBEHESHT = (2, 31, "اردیبهشت", "Ordibehesht")
    KHORDAD = (3, 31, "خرداد", "Khordad")
    TIR = (4, 31, "تیر", "Tir")
    MORDAD = (5, 31, "مرداد", "Mordad")
    SHAHRIVAR = (6, 31, "شهریور", "Shahrivar")
    MEHR = (7, 30, "مهر", "Mehr")
    ABAN = (8, 30, "آبان", "Aban")
    AZAR = (9, 30, "آذر", "Azar")
    DEY = (10, 30, "دی", "Dey")
    BAHMAN = (11, 30, "بهمن", "Bahman")
    ESFAND = (12, 29, "اسفند", "Esfand")

    def __init__(self, number: int, days: int, persian_name: str, english_name: str):
        self.number = number
        self.days = days
        self.persian_name = persian_name
        self.english_name = english_name

    @classmethod
    def of(cls, number: int) -> Month:
        """
        Return the month with the given ordinal.

        Raises:
            InvalidMonthError: If ``number`` is None or outside 1..12.
        """
        if number is None:
            raise InvalidMonthError(None)
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"month number must be int, got {type(number).__name__}")
        try:
            return _MONTHS_BY_NUMBER[number]
        except KeyError:
            raise InvalidMonthError(number) from None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Month.{self.name}"


_MONTHS_BY_NUMBER: dict[int, Month] = {m.number: m for m in Month}
