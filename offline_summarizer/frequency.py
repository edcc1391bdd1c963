from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Sequence, Tuple


@dataclass(frozen=True)
class FrequencyTable:
    """Read-only word -> occurrence count for a single document."""

    counts: Mapping[str, int]

    def get(self, word: str) -> int:
        return self.counts.get(word, 0)

    def __contains__(self, word: object) -> bool:
        return word in self.counts

    def __len__(self) -> int:
        return len(self.counts)

    def most_common(self, top_k: int = 15) -> List[Tuple[str, int]]:
        # count desc, then word, so equal counts list the same way on every run
        ranked = sorted(self.counts.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:top_k]


def build_frequency_table(token_lists: Iterable[Sequence[str]]) -> FrequencyTable:
    """Count every token of every sentence. Exact string matching only."""

    counts: Counter[str] = Counter()
    for tokens in token_lists:
        counts.update(tokens)
    return FrequencyTable(counts=MappingProxyType(dict(counts)))
