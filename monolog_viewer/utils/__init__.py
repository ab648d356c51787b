"""工具模块.

主要工具:
- structlog_config: 结构化日志配置
- time_utils: 时间戳转换与格式化
- serialized_payload: PHP 序列化载荷识别
- sort_allowlist: 排序参数白名单校验
- route_safety: 路由异常处理与日志
- response_utils: 统一 JSON 响应
"""
