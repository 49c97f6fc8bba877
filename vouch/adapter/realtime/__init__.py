"""Realtime notification adapter."""

from .gateway import EmittedEvent, RecordingRealtimeGateway, WebSocketGateway

__all__ = ["EmittedEvent", "RecordingRealtimeGateway", "WebSocketGateway"]
