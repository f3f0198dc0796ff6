"""
命令处理器层
"""

from .command_handler import CommandHandler

__all__ = ["CommandHandler"]
