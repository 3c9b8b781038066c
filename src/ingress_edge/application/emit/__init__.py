"""Application emit – atomic queue append and over-limit notification."""
from ingress_edge.application.emit.emitter import EventEmitter
from ingress_edge.application.emit.notifier import OverLimitNotifier

__all__ = ["EventEmitter", "OverLimitNotifier"]
