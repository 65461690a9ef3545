"""Ministry Companion - 장로교 목회자를 위한 AI 목회 비서"""

__version__ = "1.0.0"
