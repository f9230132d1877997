from backend.engine.gamepreview.preview import (
    EMPTY_PREVIEW,
    PreviewCalculator,
    PreviewResult,
)

__all__ = ["EMPTY_PREVIEW", "PreviewCalculator", "PreviewResult"]
