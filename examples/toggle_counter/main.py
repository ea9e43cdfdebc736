import logging

from minidux import create_store
from minidux.toggle_counter import reducer, toggle_switch, increase, decrease, connect


class ConsoleSurface:
    """把狀態打印到終端的展示介面。"""

    def __init__(self):
        self.active = False
        self.text = ""

    def set_active(self, active: bool) -> None:
        self.active = active

    def set_text(self, text: str) -> None:
        self.text = text
        print(f"[{'ON' if self.active else 'OFF'}] counter = {self.text}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    store = create_store(reducer)
    subscription = connect(store, ConsoleSurface())

    # 模擬按鈕點擊
    print("\n==== 開始測試基本操作 ====")
    store.dispatch(toggle_switch())
    store.dispatch(increase(1))
    store.dispatch(increase(1))
    store.dispatch(decrease())

    # 取消訂閱後不再渲染
    subscription.unsubscribe()
    store.dispatch(toggle_switch())

    print("\n==== 最終狀態 ====")
    print(store.get_state())
