from tilelink.engine.gameplay.game import GamePlay, Selection, SelectionKind

__all__ = ["GamePlay", "Selection", "SelectionKind"]
