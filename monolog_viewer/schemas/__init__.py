"""Pydantic schemas.

集中维护读路径的 query schema, 用于:
- 类型转换与默认值
- 排序/分页参数的白名单校验与边界裁剪
"""
