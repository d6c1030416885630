"""工具模块"""
from .formatting import format_number
from .trace import TraceSink, LoggingTraceSink, RecordingTraceSink

__all__ = ['format_number', 'TraceSink', 'LoggingTraceSink', 'RecordingTraceSink']
