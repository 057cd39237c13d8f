from tilelink.engine.gamestate.state import GamePhase, GameState

__all__ = ["GamePhase", "GameState"]
