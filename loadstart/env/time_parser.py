import re
from datetime import timedelta


class TimeParser:
    def __init__(self) -> None:
        self._units = {
            "s": "seconds",
            "m": "minutes",
            "h": "hours",
            "d": "days",
            "w": "weeks",
        }

    def parse(self, time_amount: str | int | float) -> float:
        if isinstance(time_amount, (int, float)):
            return float(time_amount)

        amounts: dict[str, float] = {}
        for m in re.finditer(
            r"(?P<val>\d+(\.\d+)?)(?P<unit>ms|[smhdw]?)",
            time_amount,
            flags=re.I,
        ):
            unit = m.group("unit").lower()
            value = float(m.group("val"))

            if unit == "ms":
                unit, value = "s", value / 1000

            field = self._units.get(unit, "seconds")
            amounts[field] = amounts.get(field, 0.0) + value

        if len(amounts) == 0:
            raise ValueError(f"Could not parse duration from {time_amount!r}")

        return float(timedelta(**amounts).total_seconds())

    def parse_many(self, time_amounts: str, separator: str = ",") -> tuple[float, ...]:
        return tuple(
            self.parse(time_amount.strip())
            for time_amount in time_amounts.split(separator)
            if time_amount.strip()
        )
