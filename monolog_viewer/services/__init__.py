"""服务层模块.

主要模块:
- log_viewer: 日志列表页(读取、格式化、视图模型组装)
"""
