"""路由模块.

- main: 首页跳转
- logs: 日志列表页与 JSON 接口
"""
