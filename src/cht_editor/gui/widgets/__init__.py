"""widgets — the two panels of the editor window."""

from cht_editor.gui.widgets.cheat_form import CheatFormPanel
from cht_editor.gui.widgets.cheat_list import CheatListPanel

__all__ = ["CheatFormPanel", "CheatListPanel"]
