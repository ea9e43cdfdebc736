from typing import Dict, Any, Callable, Optional
from .actions import Action
from .immutable_utils import to_immutable
from .types import S

Reducer = Callable[[Optional[S], Action[Any]], S]

def create_reducer(initial_state: S, *handlers) -> Reducer[S]:
    """
    創建一個 reducer 函式，用於處理狀態變更。

    Args:
        initial_state: 初始狀態，state 為 None 時使用。dict 會被凍結為 Map。
        *handlers: 一系列 (action_type, handler_fn) 元組或使用 on 函式創建的處理器。

    Returns:
        一個 reducer 函式，根據 action 的類型執行對應的處理邏輯。
    """
    initial_state = to_immutable(initial_state)
    action_handlers = {}  # 儲存 action 類型與處理函式的對應關係

    for handler in handlers:
        if isinstance(handler, tuple) and len(handler) == 2:
            action_type, handler_fn = handler
            action_handlers[action_type] = handler_fn
        else:
            action_handlers.update(handler)

    def reducer(state: Optional[S] = None, action: Action = None) -> S:
        """
        Reducer 函式，根據 action 處理狀態變更。

        Args:
            state: 當前狀態，為 None 時使用初始狀態。
            action: 要處理的 action。

        Returns:
            新的狀態，如果沒有對應的處理器則返回原狀態。
        """
        if state is None:
            state = initial_state
        if action is None:
            return state

        handler = action_handlers.get(action.type)
        if handler:
            return handler(state, action)
        return state

    reducer.initial_state = initial_state
    reducer.handlers = dict(action_handlers)

    return reducer

def on(action_creator_or_type, handler) -> Dict[str, Callable[..., Any]]:
    """
    創建一個 action 類型與處理函式的映射。

    Args:
        action_creator_or_type: Action 創建器函式或 Action 類型字串。
        handler: 處理該 Action 的函式，接收 (state, action) 並返回新狀態。

    Returns:
        一個包含 {action_type: handler} 的字典。
    """
    if callable(action_creator_or_type) and hasattr(action_creator_or_type, 'type'):
        action_type = action_creator_or_type.type
    else:
        action_type = str(action_creator_or_type)

    return {action_type: handler}
