"""
Tag cloud data models.

Ranked entries and the cloud they form are immutable pydantic models:
they are created once during ranking and only read afterwards.
"""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class RankedEntry(BaseModel):
    """A word with its occurrence count and assigned font tier."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, description="Lowercased word")
    count: int = Field(..., ge=0, description="Occurrences in the input")
    tier: int = Field(..., description="Font tier, larger = more frequent")


class TagCloud(BaseModel):
    """
    Result of a ranking run.

    ``entries`` is ordered alphabetically and holds at most
    ``requested_count`` words.
    """
    model_config = ConfigDict(frozen=True)

    entries: Tuple[RankedEntry, ...] = ()
    requested_count: int = Field(..., ge=0)
    distinct_words: int = Field(default=0, ge=0)
    total_words: int = Field(default=0, ge=0)

    def __len__(self) -> int:
        return len(self.entries)

    def words(self) -> List[str]:
        """Words in presentation order."""
        return [entry.word for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        """Convert the cloud to a plain dictionary."""
        return {
            "requested_count": self.requested_count,
            "distinct_words": self.distinct_words,
            "total_words": self.total_words,
            "entries": [entry.model_dump() for entry in self.entries],
        }
