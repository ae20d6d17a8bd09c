"""panetree 配置

配置分为以下几类：
- 适配器配置：驱动哪个终端复用器以及如何连接
- 确认配置：activate/resize 之后轮询布局确认生效
- 分屏配置：新 pane 的默认大小
- 服务配置：CLI 客户端访问的 daemon 地址
- 日志与指标
"""

import os

# === 适配器配置 ===
TERMINAL_ADAPTER = os.environ.get("PANETREE_ADAPTER", "auto")  # auto | wezterm | tmux
WEZTERM_BIN = os.environ.get("PANETREE_WEZTERM_BIN", "wezterm")
TMUX_SOCKET = os.environ.get("PANETREE_TMUX_SOCKET") or None

# === 确认配置 ===
SETTLE_DELAY_SECONDS = 0.01  # wait before the first confirmation poll
SETTLE_POLL_INTERVAL = 0.02  # interval between layout polls
SETTLE_TIMEOUT_SECONDS = 0.5  # give up and continue with a warning

# === 分屏配置 ===
DEFAULT_SPLIT_PERCENT = 50

# === 服务配置 ===
SERVER_HOST = os.environ.get("PANETREE_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("PANETREE_PORT", "8766"))
CLIENT_TIMEOUT = 30.0  # equalize on a busy tab can take a while

# === 日志配置 ===
LOG_LEVEL = os.environ.get("PANETREE_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# === 指标配置 ===
METRICS_ENABLED = True
