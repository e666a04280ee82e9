from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

SortField = Literal["symbol", "name", "value", "gainLoss", "gainLossPercent", "currentPrice"]
SortDirection = Literal["asc", "desc"]

# API sort keys → Holding attribute names
SORT_ATTRIBUTES: dict[str, str] = {
    "symbol":          "symbol",
    "name":            "name",
    "value":           "value",
    "gainLoss":        "gain_loss",
    "gainLossPercent": "gain_loss_percent",
    "currentPrice":    "current_price",
}


def round_half_away(value: float, places: int = 0) -> float | int:
    """
    Round half away from zero on the float's shortest decimal repr,
    so 0.125 -> 0.13 and -2.5 -> -3 (builtin round() would give 0.12 and -2).
    places=0 returns an int.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if places == 0:
        return int(rounded)
    return float(rounded)


class Holding(BaseModel):
    """
    One security position. value, gain_loss and gain_loss_percent are
    derived from quantity / avg_price / current_price on every read.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )

    symbol: str = Field(min_length=1)
    name: str
    quantity: int = Field(gt=0)
    avg_price: float = Field(gt=0)
    current_price: float = Field(gt=0)
    sector: str
    market_cap: str

    @field_validator("symbol")
    @classmethod
    def _normalize_symbol(cls, v: str) -> str:
        v = v.strip().upper()
        if not v:
            raise ValueError("symbol must not be blank")
        return v

    @property
    def invested(self) -> float:
        return self.quantity * self.avg_price

    @computed_field(alias="value")
    @property
    def value(self) -> float:
        return round_half_away(self.quantity * self.current_price, 2)

    @computed_field(alias="gainLoss")
    @property
    def gain_loss(self) -> float:
        return round_half_away(self.quantity * self.current_price - self.invested, 2)

    @computed_field(alias="gainLossPercent")
    @property
    def gain_loss_percent(self) -> float:
        gain = self.quantity * self.current_price - self.invested
        return round_half_away(gain / self.invested * 100, 2)


class HoldingsStore:
    """Immutable snapshot of the holdings list, shared read-only by every request."""

    def __init__(self, holdings: Iterable[Holding]):
        self._holdings = tuple(holdings)
        seen: set[str] = set()
        for h in self._holdings:
            if h.symbol in seen:
                raise ValueError(f"Duplicate holding symbol: {h.symbol}")
            seen.add(h.symbol)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "HoldingsStore":
        return cls(Holding.model_validate(r) for r in records)

    def list(self) -> tuple[Holding, ...]:
        return self._holdings

    def __len__(self) -> int:
        return len(self._holdings)

    def __iter__(self):
        return iter(self._holdings)


def filter_holdings(holdings: Iterable[Holding], search: str | None) -> list[Holding]:
    """Case-insensitive substring match on symbol, name or sector."""
    if not search or not search.strip():
        return list(holdings)
    term = search.strip().lower()
    return [
        h for h in holdings
        if term in h.symbol.lower() or term in h.name.lower() or term in h.sector.lower()
    ]


def sort_holdings(
    holdings: Iterable[Holding],
    field: SortField,
    direction: SortDirection = "desc",
) -> list[Holding]:
    attr = SORT_ATTRIBUTES[field]

    def _key(h: Holding):
        v = getattr(h, attr)
        return v.lower() if isinstance(v, str) else v

    return sorted(holdings, key=_key, reverse=(direction == "desc"))
