"""Country model used by the demo dataset."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Country:
    """A country entry from the sample dataset.

    Matched by its English name; the native name is shown alongside.
    """

    code: str
    name: str
    native: str
    capital: Optional[str] = None

    @property
    def fuzzy_text(self) -> str:
        """Text used for fuzzy matching."""
        return self.name

    @property
    def display_native(self) -> str:
        """Native name, or empty when it equals the English name."""
        return "" if self.native == self.name else self.native
