"""
GUI ViewModels — pure-Python editor state.

No Qt imports here; every class is testable without a display.
Qt widgets read from and write to these objects and refresh themselves
afterwards.

Public API
──────────
CheatListViewModel — the open document plus selection, filter and edits
"""

import logging
from typing import Optional

from cht_editor.codec import CheatEntry, ChtDocument, parse, serialize
from cht_editor.config import DEFAULT_NAME
from cht_editor.exceptions import DocumentError

__all__ = ["CheatListViewModel"]

logger = logging.getLogger(__name__)


class CheatListViewModel:
    """
    Holds the open ChtDocument and applies user edits to it.

    Every add / remove rewrites document.cheats_count to the number of
    entries, so a saved file always declares what it contains.  Entries are
    addressed by id only; positions change on reorder.

    Attributes
    ──────────
    document      — the open ChtDocument, or None
    selected_id   — id of the highlighted cheat, or None
    filter_text   — substring matched against descriptions (case-insensitive)
    dirty         — True after any edit not yet exported
    visible_cheats — derived: cheats whose description contains filter_text
    """

    def __init__(self) -> None:
        self.document:    Optional[ChtDocument] = None
        self.selected_id: Optional[str]         = None
        self.filter_text: str                   = ""
        self.dirty:       bool                  = False

    # ── Document lifecycle ────────────────────────────────────────────────

    def load_text(self, text: str, name: str = "") -> ChtDocument:
        """
        Parse *text* and make it the open document.

        On a ParseError the previously open document is left untouched.
        """
        doc = parse(text, name=name)
        self._open(doc)
        return doc

    def load_document(self, doc: ChtDocument) -> None:
        """Make an already parsed *doc* the open document."""
        self._open(doc)

    def new_document(self, name: str = DEFAULT_NAME) -> ChtDocument:
        """Open an empty document called *name*."""
        doc = ChtDocument(name=name)
        self._open(doc)
        return doc

    def export_text(self) -> str:
        """Serialize the open document and clear the dirty flag."""
        text = serialize(self._require_document())
        self.dirty = False
        return text

    def _open(self, doc: ChtDocument) -> None:
        self.document = doc
        self.selected_id = None
        self.dirty = False
        logger.debug("Opened %r with %d cheats", doc.name, len(doc.cheats))

    # ── Queries ───────────────────────────────────────────────────────────

    @property
    def cheats(self) -> list[CheatEntry]:
        return list(self.document.cheats) if self.document else []

    @property
    def visible_cheats(self) -> list[CheatEntry]:
        """Return cheats whose description contains filter_text (case-insensitive)."""
        if not self.filter_text:
            return self.cheats
        query = self.filter_text.lower()
        return [c for c in self.cheats if query in c.description.lower()]

    @property
    def selected(self) -> Optional[CheatEntry]:
        if self.document is None or self.selected_id is None:
            return None
        index = self.document.find(self.selected_id)
        return self.document.cheats[index] if index >= 0 else None

    @property
    def has_count_mismatch(self) -> bool:
        """True iff the declared header count differs from the entries present."""
        return self.document is not None and not self.document.count_matches

    def get(self, cheat_id: str) -> CheatEntry:
        """Return the cheat with *cheat_id*; raises DocumentError if unknown."""
        doc = self._require_document()
        return doc.cheats[self._index_of(doc, cheat_id)]

    def select(self, cheat_id: Optional[str]) -> None:
        """Highlight the cheat with *cheat_id* (None clears the selection)."""
        if cheat_id is not None:
            self.get(cheat_id)
        self.selected_id = cheat_id

    # ── Edits ─────────────────────────────────────────────────────────────

    def add_cheat(
        self,
        description: str = "",
        code: str = "",
        enabled: bool = False,
    ) -> CheatEntry:
        """Append a new cheat with a fresh id and select it."""
        doc = self._require_document()
        cheat = CheatEntry(description=description, code=code, enabled=enabled)
        doc.cheats.append(cheat)
        doc.cheats_count = len(doc.cheats)
        self.selected_id = cheat.id
        self.dirty = True
        return cheat

    def remove_cheat(self, cheat_id: str) -> CheatEntry:
        """Remove and return the cheat with *cheat_id*."""
        doc = self._require_document()
        cheat = doc.cheats.pop(self._index_of(doc, cheat_id))
        doc.cheats_count = len(doc.cheats)
        if self.selected_id == cheat_id:
            self.selected_id = None
        self.dirty = True
        return cheat

    def move_cheat(self, cheat_id: str, new_index: int) -> None:
        """Move the cheat with *cheat_id* to position *new_index*."""
        doc = self._require_document()
        if not 0 <= new_index < len(doc.cheats):
            raise DocumentError(
                f"index {new_index} out of range for {len(doc.cheats)} cheats"
            )
        old_index = self._index_of(doc, cheat_id)
        if old_index == new_index:
            return
        doc.cheats.insert(new_index, doc.cheats.pop(old_index))
        self.dirty = True

    def reorder(self, cheat_ids: list[str]) -> None:
        """Put the cheats in the order given by *cheat_ids* (a permutation)."""
        doc = self._require_document()
        by_id = {c.id: c for c in doc.cheats}
        if sorted(cheat_ids) != sorted(by_id):
            raise DocumentError("reorder ids do not match the open document")
        if [c.id for c in doc.cheats] == list(cheat_ids):
            return
        doc.cheats[:] = [by_id[i] for i in cheat_ids]
        self.dirty = True

    def set_enabled(self, cheat_id: str, enabled: bool) -> None:
        cheat = self.get(cheat_id)
        if cheat.enabled != enabled:
            cheat.enabled = enabled
            self.dirty = True

    def toggle(self, cheat_id: str) -> bool:
        """Flip the enabled flag; returns the new value."""
        cheat = self.get(cheat_id)
        self.set_enabled(cheat_id, not cheat.enabled)
        return cheat.enabled

    def update_cheat(
        self,
        cheat_id: str,
        description: Optional[str] = None,
        code: Optional[str] = None,
    ) -> None:
        """Replace the description and/or display code of a cheat."""
        cheat = self.get(cheat_id)
        if description is not None and description != cheat.description:
            cheat.description = description
            self.dirty = True
        if code is not None and code != cheat.code:
            cheat.code = code
            self.dirty = True

    # ── Internal helpers ──────────────────────────────────────────────────

    def _require_document(self) -> ChtDocument:
        if self.document is None:
            raise DocumentError("No document open")
        return self.document

    @staticmethod
    def _index_of(doc: ChtDocument, cheat_id: str) -> int:
        index = doc.find(cheat_id)
        if index < 0:
            raise DocumentError(f"Unknown cheat id {cheat_id!r}")
        return index
