"""Multiplexer Adapters 模块

提供终端复用器适配器接口和数据结构：
- MultiplexerAdapter: 适配器接口
- create_adapter: 适配器工厂
- LayoutData, WindowInfo, TabInfo, PaneInfo: 布局数据结构
"""

from .models import (
    LayoutData,
    PaneInfo,
    TabInfo,
    WindowInfo,
)
from .base import MultiplexerAdapter
from .factory import create_adapter, detect_terminal_type

__all__ = [
    # 接口
    "MultiplexerAdapter",
    # 工厂
    "create_adapter",
    "detect_terminal_type",
    # 布局数据
    "LayoutData",
    "WindowInfo",
    "TabInfo",
    "PaneInfo",
]
