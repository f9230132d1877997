from backend.engine.gameregion.region import RegionTracker

__all__ = ["RegionTracker"]
