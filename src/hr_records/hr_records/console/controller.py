from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, session, url_for

from ..auth.decorators import admin_required
from ..auth.session import SessionHolder
from ..catalogs.definitions import ALL_CATALOGS
from ..container import Container
from ..core.enums import EducationBucket
from ..core.exceptions import DomainError
from ..dashboard.service import DashboardStats
from .menu import DASHBOARD, MENU, ROOT_ID, find_node, toggle

MENU_OPEN_KEY = "menu_open"
ACTIVE_PAGE_KEY = "active_page"

# Lá menu có màn hình riêng; các lá còn lại mở trang "đang phát triển".
_LEAF_ENDPOINTS = {
    "hoSoNhanSu": ("roster_list", {}),
    "taiKhoan": ("accounts_list", {}),
}
_LEAF_ENDPOINTS.update({d.menu_id: ("catalog_list", {"slug": d.slug}) for d in ALL_CATALOGS})


def leaf_target(node_id: str) -> str:
    if node_id in _LEAF_ENDPOINTS:
        endpoint, values = _LEAF_ENDPOINTS[node_id]
        return url_for(endpoint, **values)
    return url_for("admin_section", node_id=node_id)


def register(app: Flask, container: Container) -> None:
    @app.context_processor
    def inject_menu():
        current = SessionHolder(session).current()
        if current is None or not current.is_admin:
            return {}
        return {
            "menu": MENU,
            "menu_open": frozenset(session.get(MENU_OPEN_KEY, [ROOT_ID])),
            "menu_active": session.get(ACTIVE_PAGE_KEY, DASHBOARD),
        }

    @app.route("/admin", endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        session[ACTIVE_PAGE_KEY] = DASHBOARD
        try:
            stats = container.dashboard_service.build_stats()
        except DomainError as e:
            flash(str(e), "danger")
            stats = DashboardStats()
        except Exception:
            app.logger.exception("Dashboard stats failed")
            flash("Không tải được số liệu thống kê", "danger")
            stats = DashboardStats()

        return render_template(
            "admin/dashboard.html",
            stats=stats,
            buckets=list(EducationBucket),
            active_page=DASHBOARD,
        )

    @app.route("/admin/menu/<node_id>", endpoint="admin_menu")
    @admin_required
    def admin_menu(node_id: str):
        node = find_node(node_id)
        if node is None:
            abort(404)

        if node.has_children:
            opened = toggle(session.get(MENU_OPEN_KEY, [ROOT_ID]), node.id)
            session[MENU_OPEN_KEY] = sorted(opened)
            if node.id == ROOT_ID:
                session[ACTIVE_PAGE_KEY] = DASHBOARD
                return redirect(url_for("admin_dashboard"))
            return redirect(request.referrer or url_for("admin_dashboard"))

        session[ACTIVE_PAGE_KEY] = node.id
        return redirect(leaf_target(node.id))

    @app.route("/admin/section/<node_id>", endpoint="admin_section")
    @admin_required
    def admin_section(node_id: str):
        node = find_node(node_id)
        if node is None:
            abort(404)
        return render_template("admin/placeholder.html", node=node, active_page=node.id)
