"""Output sinks for generated documents."""

from .sinks import FileSink, MemorySink, OutputSink

__all__ = ["FileSink", "MemorySink", "OutputSink"]
