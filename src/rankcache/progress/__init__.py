"""Progress reporting adapters."""

from rankcache.progress.rich_progress import RichProgressReporter


__all__ = ["RichProgressReporter"]
