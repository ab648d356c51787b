"""Schema 基础设施."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class QuerySchema(BaseModel):
    """读路径 query 参数的基础 schema.

    约定:
    - 默认忽略未知字段, 宿主页面的表单可能携带额外参数.
    - 字段 validator 负责规范化与默认值, 非法值尽量降级而不是报错.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
