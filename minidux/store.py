import logging
import threading
from typing import Any, Callable, Generic, List, Optional

import reactivex
from reactivex import Observable, operators as ops
from reactivex.disposable import Disposable

from .actions import init_store, to_action
from .config import StoreConfig
from .errors import ConfigurationError, ReentrancyError
from .immutable_utils import to_immutable
from .types import S, Observer, ReducerFunction

logger = logging.getLogger(__name__)


class Subscription:
    """
    subscribe 返回的取消訂閱句柄。

    每個句柄對應一次註冊，只能兌現一次：呼叫句柄本身或 unsubscribe()
    都會移除該註冊，之後的呼叫不做任何事。
    """

    __slots__ = ("_store", "_observer", "_active")

    def __init__(self, store: "Store[Any]", observer: Observer):
        self._store = store
        self._observer = observer
        self._active = True

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def active(self) -> bool:
        """該註冊是否仍然有效。"""
        return self._active

    def unsubscribe(self) -> None:
        """移除此註冊。重複呼叫為空操作。"""
        if self._active:
            self._store._remove(self)

    __call__ = unsubscribe

    def __repr__(self):
        return f"Subscription(observer={self._observer!r}, active={self._active})"


class Store(Generic[S]):
    """
    狀態容器，持有單一狀態並在每次分發後同步通知觀察者。

    狀態只能透過 dispatch 經由 reducer 更新。每次被接受的分發都會先完整計算
    新狀態再提交，然後依註冊順序呼叫所有觀察者（無論狀態是否改變）。
    """

    def __init__(
        self,
        reducer: Optional[ReducerFunction[S]] = None,
        initial_state: Optional[S] = None,
        config: Optional[StoreConfig] = None,
    ):
        """
        建立一個 Store 實例。

        Args:
            reducer: 純函數 (state, action) -> next_state。
            initial_state: 可選的初始狀態；為 None 時由 reducer 的預設值決定。
                dict 等可變結構會先以 to_immutable 凍結。
            config: 可選的 StoreConfig。

        Raises:
            ConfigurationError: reducer 不可呼叫或 config 類型錯誤。
        """
        if not callable(reducer):
            raise ConfigurationError(
                "Expected the reducer to be a function", component="Store", config_key="reducer"
            )
        if config is None:
            config = StoreConfig()
        elif not isinstance(config, StoreConfig):
            raise ConfigurationError(
                "Expected config to be a StoreConfig", component="Store", config_key="config"
            )

        self._reducer = reducer
        self._config = config
        # 保護 read-compute-commit-notify 序列；同一執行緒可重入
        self._lock = threading.RLock()
        self._subscriptions: List[Subscription] = []
        self._reducing = False
        self._notify_depth = 0

        # 以哨兵 action 讓 reducer 的預設值決定真正的初始狀態
        self._state: S = reducer(to_immutable(initial_state), init_store())
        logger.debug("[%s] store created with state %r", config.name, self._state)

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def state(self) -> S:
        """當前狀態的引用，應視為唯讀。"""
        return self._state

    def get_state(self) -> S:
        """
        返回當前狀態的引用，不做任何複製。

        Returns:
            當前狀態。
        """
        return self._state

    @property
    def observer_count(self) -> int:
        """目前有效的註冊數量。"""
        return len(self._subscriptions)

    @property
    def is_dispatching(self) -> bool:
        """是否有分發（reducer 計算或通知）正在進行。"""
        return self._reducing or self._notify_depth > 0

    def dispatch(self, action: Any) -> Any:
        """
        分發一個動作，觸發 reduce-commit-notify 循環。

        Args:
            action: Action、帶 "type" 鍵的映射或帶 type 屬性的物件。

        Returns:
            正規化後的 action，便於鏈式呼叫。

        Raises:
            InvalidActionError: action 缺少 type 判別欄位，狀態不變。
            ReentrancyError: 在 reducer 內部分發，或在嚴格模式下於通知期間分發。
        """
        action = to_action(action)

        with self._lock:
            if self._reducing:
                raise ReentrancyError(
                    "Reducers may not dispatch actions", operation="dispatch", action_type=action.type
                )
            if self._notify_depth and self._config.strict_reentrancy:
                raise ReentrancyError(
                    "Dispatch is not allowed while observers are being notified",
                    operation="dispatch",
                    action_type=action.type,
                )

            logger.debug("[%s] dispatching %s", self._config.name, action.type)
            self._reducing = True
            try:
                next_state = self._reducer(self._state, action)
            finally:
                self._reducing = False

            self._state = next_state
            self._notify()

        return action

    def _notify(self) -> None:
        # 每一輪通知使用註冊表快照；已取消的註冊在輪到它之前會被跳過
        snapshot = list(self._subscriptions)
        self._notify_depth += 1
        try:
            for subscription in snapshot:
                if subscription.active:
                    subscription.observer()
        finally:
            self._notify_depth -= 1

    def subscribe(self, observer: Observer) -> Subscription:
        """
        註冊一個無參數的觀察者。

        同一個函式註冊兩次會被呼叫兩次，每次註冊都有自己的句柄。

        Args:
            observer: 每次分發後被呼叫的回呼。

        Returns:
            用於取消此註冊的 Subscription。

        Raises:
            ConfigurationError: observer 不可呼叫。
            ReentrancyError: 在 reducer 內部註冊。
        """
        if not callable(observer):
            raise ConfigurationError(
                "Expected the observer to be a function", component="Store", config_key="observer"
            )
        with self._lock:
            if self._reducing:
                raise ReentrancyError("Reducers may not subscribe observers", operation="subscribe")
            subscription = Subscription(self, observer)
            self._subscriptions.append(subscription)
        logger.debug("[%s] observer subscribed (%d active)", self._config.name, self.observer_count)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        with self._lock:
            if self._reducing:
                raise ReentrancyError("Reducers may not unsubscribe observers", operation="unsubscribe")
            if not subscription._active:
                return
            subscription._active = False
            self._subscriptions.remove(subscription)
        logger.debug("[%s] observer unsubscribed (%d active)", self._config.name, self.observer_count)

    def select(self, selector: Optional[Callable[[S], Any]] = None) -> Observable:
        """
        選擇狀態的一部分進行觀察。

        返回的 Observable 在被訂閱時向 Store 註冊觀察者，只有選取的值改變時
        才發出 (舊值, 新值) 元組；釋放 rx 訂閱會同時取消 Store 註冊。

        Args:
            selector: 一個函數，接收整個狀態並返回希望觀察的部分。

        Returns:
            一個可觀察對象，發送 (old, new) 元組。
        """
        if selector is None:
            selector = lambda state: state

        def subscribe(observer, scheduler=None):
            # 先送出當前值作為 pairwise 的基準；與註冊在同一把鎖內完成，不會漏掉分發
            with self._lock:
                observer.on_next(selector(self._state))
                subscription = self.subscribe(lambda: observer.on_next(selector(self._state)))
            return Disposable(subscription.unsubscribe)

        return reactivex.create(subscribe).pipe(
            ops.distinct_until_changed(),
            ops.pairwise(),
        )


def create_store(
    reducer: ReducerFunction[S],
    initial_state: Optional[S] = None,
    config: Optional[StoreConfig] = None,
) -> Store[S]:
    """
    創建一個新的 Store 實例。

    Args:
        reducer: 純函數 (state, action) -> next_state。
        initial_state: 可選的初始狀態。
        config: 可選的 StoreConfig。

    Returns:
        Store: 新創建的 Store 實例。
    """
    return Store(reducer, initial_state, config)
