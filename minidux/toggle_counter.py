"""
開關與計數器範例領域。

定義 action 類型、action 生成函數、初始狀態與 reducer，以及把狀態寫到
展示介面上的渲染協作者。渲染協作者只讀取狀態，所有變更都經由 dispatch。
"""
from immutables import Map

from .actions import create_action
from .reducers import create_reducer, on
from .store import Store, Subscription
from .store_selectors import create_selector
from .types import Surface

# ====== Action 類型 ======
TOGGLE_SWITCH = "TOGGLE_SWITCH"
INCREASE = "INCREASE"
DECREASE = "DECREASE"

# ====== Action 生成函數 ======
toggle_switch = create_action(TOGGLE_SWITCH)
increase = create_action(INCREASE, lambda difference: {"difference": difference})
decrease = create_action(DECREASE)

# ====== 初始狀態 ======
INITIAL_STATE = Map(toggle=False, counter=0)


# ====== Handlers ======
def toggle_switch_handler(state: Map, action) -> Map:
    return state.set("toggle", not state["toggle"])


def increase_handler(state: Map, action) -> Map:
    return state.set("counter", state["counter"] + action.payload["difference"])


def decrease_handler(state: Map, action) -> Map:
    return state.set("counter", state["counter"] - 1)


# ====== Reducer ======
reducer = create_reducer(
    INITIAL_STATE,
    on(toggle_switch, toggle_switch_handler),
    on(increase, increase_handler),
    on(decrease, decrease_handler),
)

# ====== Selectors ======
get_toggle = lambda state: state["toggle"]
get_counter = lambda state: state["counter"]


def make_view_selector():
    """建立一個記憶化選擇器，返回 (是否啟用, 計數文字)。"""
    return create_selector(
        get_toggle,
        get_counter,
        result_fn=lambda toggle, counter: (bool(toggle), str(counter)),
    )


def render(state: Map, surface: Surface) -> None:
    """把狀態寫到展示介面上。"""
    surface.set_active(bool(get_toggle(state)))
    surface.set_text(str(get_counter(state)))


def connect(store: Store, surface: Surface) -> Subscription:
    """
    先渲染一次，再訂閱 store，使每次分發後重新渲染。

    Args:
        store: 要觀察的 Store
        surface: 展示介面

    Returns:
        渲染觀察者的 Subscription
    """
    select_view = make_view_selector()

    def on_change() -> None:
        active, text = select_view(store.get_state())
        surface.set_active(active)
        surface.set_text(text)

    render(store.get_state(), surface)
    return store.subscribe(on_change)
