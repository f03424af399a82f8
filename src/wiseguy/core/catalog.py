"""Joke catalog - the fixed set of jokes the skill can tell."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from wiseguy.core.errors import ConfigError

logger = logging.getLogger(__name__)


class JokeRecord(BaseModel):
    """One scripted joke."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    setup: str = Field(min_length=1, description="Line spoken after 'who's there'")
    speech_punchline: str = Field(
        alias="speechPunchline", min_length=1, description="Spoken punchline (SSML allowed)"
    )
    card_punchline: str = Field(
        alias="cardPunchline", min_length=1, description="Punchline shown on the card"
    )


class JokeCatalog:
    """Immutable ordered collection of jokes with uniform random selection."""

    def __init__(self, jokes: Iterable[JokeRecord], rng: random.Random | None = None):
        """
        Initialize the catalog.

        Args:
            jokes: Joke records, in catalog order
            rng: Randomness source (defaults to a fresh, unseeded Random)

        Raises:
            ConfigError: If no jokes are given
        """
        self._jokes: tuple[JokeRecord, ...] = tuple(jokes)
        if not self._jokes:
            raise ConfigError("Joke catalog is empty; at least one joke is required")
        self._rng = rng or random.Random()

    @classmethod
    def from_seed(cls, jokes: Iterable[JokeRecord], seed: int | None) -> JokeCatalog:
        """Build a catalog whose picks are reproducible when seed is set."""
        return cls(jokes, rng=random.Random(seed))

    def count(self) -> int:
        """Number of jokes in the catalog."""
        return len(self._jokes)

    def pick(self) -> JokeRecord:
        """Select one joke uniformly at random."""
        index = self._rng.randrange(len(self._jokes))
        logger.debug(f"Picked joke {index} of {len(self._jokes)}")
        return self._jokes[index]

    def __len__(self) -> int:
        return len(self._jokes)

    def __iter__(self) -> Iterator[JokeRecord]:
        return iter(self._jokes)

    def __getitem__(self, index: int) -> JokeRecord:
        return self._jokes[index]
