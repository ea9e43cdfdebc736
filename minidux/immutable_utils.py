# minidux/immutable_utils.py
from typing import Any, Type, TypeVar
from immutables import Map
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)

def to_immutable(obj: Any) -> Any:
    """將任何對象轉換為不可變形式 (包括 Pydantic 模型)"""
    if isinstance(obj, Map):
        # 值都已不可變時原樣返回，保留引用
        items = {k: to_immutable(v) for k, v in obj.items()}
        if all(items[k] is v for k, v in obj.items()):
            return obj
        return Map(items)
    elif isinstance(obj, BaseModel):
        # 凍結的 Pydantic 模型本身即不可變，保留原樣
        if obj.model_config.get("frozen"):
            return obj
        return Map({k: to_immutable(v) for k, v in obj.model_dump().items()})
    elif isinstance(obj, dict):
        return Map({k: to_immutable(v) for k, v in obj.items()})
    elif isinstance(obj, list):
        # 列表轉為元組
        return tuple(to_immutable(i) for i in obj)
    elif isinstance(obj, (set, frozenset)):
        return frozenset(to_immutable(i) for i in obj)
    return obj

def to_pydantic(map_obj: Map, model_class: Type[T]) -> T:
    """將 Map 轉換回 Pydantic 模型 (僅在需要時使用)"""
    return model_class(**to_dict(map_obj))

def to_dict(obj: Any) -> Any:
    """將 Map 及其巢狀結構轉換為普通字典"""
    if isinstance(obj, Map):
        return {k: to_dict(v) for k, v in obj.items()}
    elif isinstance(obj, tuple):
        return [to_dict(i) for i in obj]
    elif isinstance(obj, frozenset):
        return {to_dict(i) for i in obj}
    return obj
