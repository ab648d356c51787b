"""日志查看路由入口.

渲染日志列表页并提供同源的 JSON 接口.
鉴权由宿主(反向代理或上层应用)负责,这里不做权限判断.
"""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template, request, session
from markupsafe import Markup

from monolog_viewer.constants.system_constants import SuccessMessages
from monolog_viewer.schemas.logs_query import LogsListQuery
from monolog_viewer.schemas.validation import validate_or_raise
from monolog_viewer.types.log_table import ListTable, LogListFilters
from monolog_viewer.utils.response_utils import jsonify_unified_success
from monolog_viewer.utils.route_safety import safe_route_call
from monolog_viewer.views.log_list_table import LogListTable

# 创建蓝图
logs_bp = Blueprint("logs", __name__)

# 用户的每页数量偏好保存在 session 中
PER_PAGE_SESSION_KEY = "logs_per_page"


def _resolve_per_page(requested: int | None) -> int:
    """解析每页数量: 请求值 > session 偏好 > LOGS_PER_PAGE 配置."""
    maximum = int(current_app.config["LOGS_PER_PAGE_MAX"])
    if requested is not None:
        per_page = min(requested, maximum)
        session[PER_PAGE_SESSION_KEY] = per_page
        return per_page

    stored = session.get(PER_PAGE_SESSION_KEY)
    if isinstance(stored, int) and not isinstance(stored, bool) and stored > 0:
        return min(stored, maximum)
    return int(current_app.config["LOGS_PER_PAGE"])


def _extract_filters() -> LogListFilters:
    """解析请求参数(query string 与表单)为列表查询条件."""
    query = validate_or_raise(LogsListQuery, request.values.to_dict())
    return query.to_filters(per_page=_resolve_per_page(query.per_page))


@logs_bp.route("/", methods=["GET", "POST"])
def logs_page() -> str:
    """日志列表页."""

    def _render() -> str:
        filters = _extract_filters()
        table: ListTable = LogListTable()
        view_model = table.prepare_page(filters)
        return render_template(
            "logs/list.html",
            page_title=current_app.config["APP_NAME"],
            table=view_model,
            table_html=Markup(table.render()),
        )

    return safe_route_call(
        _render,
        module="logs",
        action="logs_page",
        public_error="日志列表加载失败",
        context={"endpoint": "logs_page"},
    )


@logs_bp.route("/api/entries", methods=["GET"])
def list_log_entries() -> tuple[Response, int]:
    """以 JSON 返回日志列表视图模型."""

    def _execute() -> tuple[Response, int]:
        filters = _extract_filters()
        view_model = LogListTable().prepare_page(filters)
        return jsonify_unified_success(data=view_model.to_dict(), message=SuccessMessages.LOGS_LOADED)

    return safe_route_call(
        _execute,
        module="logs",
        action="list_log_entries",
        public_error="获取日志列表失败",
        context={"endpoint": "list_log_entries"},
    )
