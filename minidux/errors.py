"""
Minidux 錯誤處理模組。

定義 Store 在建構、分發與通知過程中可能拋出的異常。
Store 本身不做任何恢復處理，所有錯誤都直接拋給呼叫者。
"""
from typing import Any, Dict, Optional


class MiniduxError(Exception):
    """
    所有 Minidux 異常的基礎類。

    屬性:
        message: 錯誤訊息
        details: 附加的錯誤細節
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """
        將錯誤轉換為字典，方便序列化。

        Returns:
            包含錯誤類型、訊息與細節的字典。
        """
        return {
            "type": type(self).__name__,
            "message": self.message,
            "details": dict(self.details),
        }

    def __str__(self) -> str:
        if not self.details:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({details})"


class ConfigurationError(MiniduxError):
    """建構參數或配置無效時拋出，例如 reducer 不可呼叫。"""

    def __init__(self, message: str, component: str, config_key: Optional[str] = None, **kwargs: Any):
        details = {"component": component}
        if config_key is not None:
            details["config_key"] = config_key
        details.update(kwargs)
        super().__init__(message, details)
        self.component = component
        self.config_key = config_key


class InvalidActionError(MiniduxError):
    """分發的值缺少必要的 type 判別欄位時拋出。"""

    def __init__(self, message: str, action: Any = None, **kwargs: Any):
        details = {"action": action}
        details.update(kwargs)
        super().__init__(message, details)
        self.action = action


class ReentrancyError(MiniduxError):
    """在不允許的時機重入 dispatch 時拋出。"""

    def __init__(self, message: str, operation: str, **kwargs: Any):
        details = {"operation": operation}
        details.update(kwargs)
        super().__init__(message, details)
        self.operation = operation
