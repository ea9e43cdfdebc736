"""
Minidux 的 Action 定義模組。

此模組提供 Action 類別以及創建 Action 的功能。
Actions 是描述狀態變更意圖的不可變對象，必須帶有 type 判別欄位。
"""
from collections.abc import Mapping
from typing import Generic, Callable, Optional, Dict, Any, Union, overload

from immutables import Map

from .errors import InvalidActionError
from .immutable_utils import to_immutable
from .types import P, ActionCreator

# 初始化 Store 時使用的哨兵 action 類型
INIT = "@@minidux/INIT"


class Action(Generic[P]):
    """
    表示一個有類型和可選負載的動作。

    泛型參數:
        P: 負載的類型

    屬性:
        type: 動作的類型字符串
        payload: 動作的負載數據（可選）
    """
    __slots__ = ('type', 'payload')

    def __init__(self, type: str, payload: Optional[P] = None):
        if not isinstance(type, str) or not type:
            raise InvalidActionError("Action type must be a non-empty string", action_type=type)
        super().__setattr__('type', type)
        super().__setattr__('payload', payload)

    def __setattr__(self, name, value):
        if name not in self.__slots__:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        raise AttributeError(f"Cannot modify immutable instance attribute '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"Cannot delete immutable instance attribute '{name}'")

    def __eq__(self, other):
        if not isinstance(other, Action):
            return False
        return self.type == other.type and self.payload == other.payload

    def __hash__(self):
        return hash((self.type, self.payload))

    def __repr__(self):
        return f"Action(type='{self.type}', payload={repr(self.payload)})"


def _process_payload(payload: Any) -> Any:
    """
    處理 payload，將字典、列表等轉換為不可變結構。

    Args:
        payload: 原始 payload

    Returns:
        處理後的 payload
    """
    return to_immutable(payload)


def action_type_of(value: Any) -> str:
    """
    取得任一 action 形式的判別欄位。

    Args:
        value: Action、帶 "type" 鍵的映射，或帶 type 屬性的物件

    Returns:
        action 的類型字符串

    Raises:
        InvalidActionError: 缺少 type 或 type 不是非空字符串
    """
    if isinstance(value, (Mapping, Map)):
        action_type = value.get("type")
    else:
        action_type = getattr(value, "type", None)

    if not isinstance(action_type, str) or not action_type:
        raise InvalidActionError(
            "Actions must carry a non-empty string 'type' field", action=value
        )
    return action_type


def to_action(value: Any) -> Any:
    """
    將分發的值正規化為 Action。

    映射形式的 action（例如 {"type": "INCREASE", "difference": 5}）會轉換為
    Action，其餘鍵組成不可變的 Map 作為 payload；沒有其餘鍵時 payload 為 None。
    Action 實例與其他帶 type 屬性的物件原樣返回。

    Args:
        value: 要正規化的值

    Returns:
        正規化後的 action

    Raises:
        InvalidActionError: 缺少 type 判別欄位
    """
    action_type = action_type_of(value)
    if isinstance(value, Action):
        return value
    if isinstance(value, (Mapping, Map)):
        fields = {k: v for k, v in value.items() if k != "type"}
        return Action(action_type, _process_payload(fields) if fields else None)
    return value


@overload
def create_action(action_type: str) -> ActionCreator:
    ...


@overload
def create_action(action_type: str, prepare_fn: Callable[..., Any]) -> ActionCreator:
    ...


def create_action(action_type: str, prepare_fn: Optional[Callable[..., Any]] = None) -> ActionCreator:
    """
    創建一個 Action 生成器函數。

    Args:
        action_type: Action 的類型標識符
        prepare_fn: 可選的預處理函數，用於在創建 Action 前處理輸入參數

    Returns:
        一個可調用的函數，用於生成指定類型的 Action

    範例:
        >>> toggle_switch = create_action("TOGGLE_SWITCH")
        >>> toggle_switch()  # 返回 Action(type='TOGGLE_SWITCH', payload=None)
        >>>
        >>> increase = create_action("INCREASE", lambda difference: {"difference": difference})
        >>> increase(5)  # 返回 Action(type='INCREASE', payload=Map({'difference': 5}))
    """
    if not isinstance(action_type, str) or not action_type:
        raise InvalidActionError("Action type must be a non-empty string", action_type=action_type)

    def action_creator(*args: Any, **kwargs: Any) -> Action[Any]:
        if prepare_fn:
            payload = prepare_fn(*args, **kwargs)
            return Action(action_type, _process_payload(payload))
        elif len(args) == 1 and not kwargs:
            return Action(action_type, _process_payload(args[0]))
        elif args or kwargs:
            payload: Dict[Union[int, str], Any] = dict(zip(range(len(args)), args))
            payload.update(kwargs)
            return Action(action_type, _process_payload(payload))

        # 無參數，無負載
        return Action(action_type)

    # 添加 type 屬性以便於識別
    action_creator.type = action_type  # type: ignore
    action_creator.__name__ = f"create_{action_type.lower()}"

    return action_creator


# 根 Actions
init_store: ActionCreator = create_action(INIT)
