"""
Minidux：單一狀態容器，透過純 reducer 更新狀態並同步通知觀察者。
"""
from .errors import MiniduxError, ConfigurationError, InvalidActionError, ReentrancyError
from .actions import Action, INIT, create_action, init_store, to_action, action_type_of
from .config import StoreConfig
from .reducers import Reducer, create_reducer, on
from .store import Store, Subscription, create_store
from .store_selectors import create_selector
from .immutable_utils import to_immutable, to_dict, to_pydantic

__all__ = [
    # Errors
    "MiniduxError", "ConfigurationError", "InvalidActionError", "ReentrancyError",

    # Actions
    "Action", "INIT", "create_action", "init_store", "to_action", "action_type_of",

    # Config
    "StoreConfig",

    # Reducers
    "Reducer", "create_reducer", "on",

    # Store
    "Store", "Subscription", "create_store",

    # Selectors
    "create_selector",

    # Immutable Utils
    "to_immutable", "to_dict", "to_pydantic",
]
