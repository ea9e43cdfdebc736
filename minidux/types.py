"""
Minidux 共用的型別定義。
"""
from typing import Any, Callable, Optional, TypeVar

from typing_extensions import Protocol

S = TypeVar("S")  # 狀態類型
P = TypeVar("P")  # 負載類型

# 觀察者：無參數回呼，透過 get_state() 自行拉取狀態
Observer = Callable[[], None]

# Reducer：(state, action) -> next_state
ReducerFunction = Callable[[Optional[S], Any], S]

# 選擇器：從狀態中取出某一部分
StateSelector = Callable[[Any], Any]


class ActionCreator(Protocol):
    """由 create_action 產生的 Action 生成器。"""

    type: str

    def __call__(self, *args: Any, **kwargs: Any) -> Any: ...


class Surface(Protocol):
    """渲染協作者寫入的展示介面。"""

    def set_active(self, active: bool) -> None: ...

    def set_text(self, text: str) -> None: ...
