"""Data models for the codec module — the in-memory .cht document."""

import uuid
from dataclasses import dataclass, field

__all__ = ["CheatEntry", "ChtDocument", "new_cheat_id"]


def new_cheat_id() -> str:
    """Return a fresh opaque identifier for a CheatEntry."""
    return uuid.uuid4().hex


@dataclass
class CheatEntry:
    """
    One cheat of a .cht file.

    description — free text shown to the user
    code        — decoded display form (one `address value` pair or token per line)
    enabled     — the cheatN_enable flag
    id          — assigned at creation, never derived from content
    """
    description: str
    code:        str
    enabled:     bool = False
    id:          str  = field(default_factory=new_cheat_id)

    def __str__(self) -> str:
        mark = "x" if self.enabled else " "
        return f"[{mark}] {self.description}"


@dataclass
class ChtDocument:
    """
    A parsed .cht file.

    cheats_count is the value declared on the header line. The codec neither
    recomputes nor checks it; whoever adds or removes entries keeps it in sync.
    """
    name:         str = ""
    cheats_count: int = 0
    cheats:       list[CheatEntry] = field(default_factory=list)

    def find(self, cheat_id: str) -> int:
        """Return the position of the entry with *cheat_id*, or -1."""
        for index, cheat in enumerate(self.cheats):
            if cheat.id == cheat_id:
                return index
        return -1

    @property
    def count_matches(self) -> bool:
        """True iff the declared header count equals the number of entries."""
        return self.cheats_count == len(self.cheats)
