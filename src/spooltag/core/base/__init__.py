from spooltag.core.base.agent import Agent
from spooltag.core.base.message import Message, Result
from spooltag.core.base.terminal import Terminal, handles

__all__ = ["Agent", "Message", "Result", "Terminal", "handles"]
