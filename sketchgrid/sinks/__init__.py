"""Render/announce sinks consumed by the sketch grid core."""

from .base import CallbackSink, CompositeSink, NullSink
from .recording import RecordingSink

__all__ = ["NullSink", "CallbackSink", "CompositeSink", "RecordingSink"]
