from backend.engine.gameprogression.progression import (
    ProgressionController,
    color_count,
)

__all__ = ["ProgressionController", "color_count"]
