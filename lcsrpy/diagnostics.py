from dataclasses import dataclass
from typing import Iterator

import pandas as pd


@dataclass(frozen=True)
class DiagnosticEntry:
    value: float
    description: str


class Diagnostics:
    """
    Ordered list of labelled intermediate values of a calculation.

    The order of the entries is part of the contract: reference values are compared
    position by position.
    """

    def __init__(self):
        self._entries: list[DiagnosticEntry] = []

    def add(self, value: float, description: str):
        self._entries.append(DiagnosticEntry(float(value), description))

    def __iter__(self) -> Iterator[DiagnosticEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> DiagnosticEntry:
        return self._entries[index]

    def values(self) -> list[float]:
        return [entry.value for entry in self._entries]

    def descriptions(self) -> list[str]:
        return [entry.description for entry in self._entries]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"description": self.descriptions(), "value": self.values()}
        )
