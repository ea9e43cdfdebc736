from typing import Any, Callable, Optional

from .types import StateSelector


def create_selector(*selectors: StateSelector, result_fn: Optional[Callable[..., Any]] = None) -> StateSelector:
    """
    創建一個記憶化的複合選擇器。

    只有當某個輸入選擇器的結果與上一次不是同一個對象時才重新計算 result_fn。
    由於 reducer 每次轉換都產生新的狀態，引用比較即可判斷是否需要重算。

    Args:
        *selectors: 多個輸入選擇器，這些函數會從 state 中提取對應的值
        result_fn: 處理輸出結果的函數，將多個選擇器的輸出進行處理

    Returns:
        經過快取優化的 selector 函數
    """
    if not selectors:
        raise ValueError("create_selector requires at least one input selector")

    # 如果沒有 result_fn 且只有一個選擇器，直接返回該選擇器
    if result_fn is None and len(selectors) == 1:
        return selectors[0]

    if result_fn is None:
        result_fn = lambda *args: args

    last_inputs: Optional[tuple] = None
    last_result: Any = None

    def selector(state: Any) -> Any:
        nonlocal last_inputs, last_result

        inputs = tuple(select(state) for select in selectors)
        if last_inputs is not None and len(inputs) == len(last_inputs) and all(
            new is old for new, old in zip(inputs, last_inputs)
        ):
            return last_result

        last_result = result_fn(*inputs)
        last_inputs = inputs
        return last_result

    selector.result_fn = result_fn  # type: ignore
    return selector
