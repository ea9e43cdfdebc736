"""
Store 的配置模型。
"""
from pydantic import BaseModel, ConfigDict, Field


class StoreConfig(BaseModel):
    """
    單一 Store 實例的配置。

    屬性:
        name: Store 名稱，出現在日誌記錄中，用於區分同一進程內的多個 Store
        strict_reentrancy: 為 True 時，在通知期間重入 dispatch 會拋出 ReentrancyError；
            為 False 時允許重入，並以深度優先順序完成內層的分發與通知
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(default="store", min_length=1)
    strict_reentrancy: bool = False
