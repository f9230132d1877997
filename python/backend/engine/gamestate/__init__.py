from backend.engine.gamestate.state import GameSnapshot, GameState, GameStatus

__all__ = ["GameSnapshot", "GameState", "GameStatus"]
