from backend.engine.gamemove.move import MoveEngine, multiplier_for, points_for

__all__ = ["MoveEngine", "multiplier_for", "points_for"]
