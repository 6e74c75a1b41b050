"""列表渲染协议."""

from .base import TableRenderer

__all__ = ["TableRenderer"]
