"""首页路由,跳转到日志列表页."""

from flask import Blueprint, redirect, url_for
from werkzeug.wrappers import Response

main_bp = Blueprint("main", __name__)


@main_bp.route("/")
def index() -> Response:
    """首页."""
    return redirect(url_for("logs.logs_page"))
