from .reporter import NullReporter, PrintReporter, RecordingReporter, Reporter

__all__ = ["Reporter", "PrintReporter", "RecordingReporter", "NullReporter"]
