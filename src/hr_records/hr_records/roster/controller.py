from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.decorators import admin_required
from ..common.datetime_utils import format_dmy
from ..common.images import fallback_avatar_url, photo_or_fallback
from ..container import Container
from ..core.exceptions import DomainError
from ..exports.download import send_excel
from .model import RosterFilters

ACTIVE_PAGE = "hoSoNhanSu"


def register(app: Flask, container: Container) -> None:
    service = container.roster_service

    @app.template_filter("dmy")
    def dmy_filter(value):
        return format_dmy(value) if value else ""

    @app.route("/admin/roster", endpoint="roster_list")
    @admin_required
    def roster_list():
        q = request.args.get("q", "").strip()
        filters = RosterFilters.from_mapping(request.args)
        entries, options = [], service.filter_options([])
        try:
            loaded = service.load()
            options = service.filter_options(loaded)
            entries = service.list(filters, q, entries=loaded)
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Load roster failed")
            flash("Lỗi tải danh sách nhân viên", "danger")

        return render_template(
            "admin/roster_list.html",
            entries=entries,
            filters=filters,
            options=options,
            q=q,
            active_page=ACTIVE_PAGE,
        )

    @app.route("/admin/roster/<int:record_id>", endpoint="roster_detail")
    @admin_required
    def roster_detail(record_id: int):
        try:
            entry = service.get_entry(record_id)
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("roster_list"))
        photo = photo_or_fallback(entry.record.photo, entry.record.full_name)
        fallback = fallback_avatar_url(entry.record.full_name)
        return render_template(
            "admin/personnel_detail.html",
            entry=entry,
            photo_url=photo,
            fallback_photo_url=fallback,
            lecturer_view=False,
            active_page=ACTIVE_PAGE,
        )

    @app.route("/admin/roster/<int:record_id>/lecturer", endpoint="roster_lecturer")
    @admin_required
    def roster_lecturer(record_id: int):
        try:
            entry = service.lecturer_profile(record_id)
        except DomainError as e:
            flash(str(e), "warning")
            return redirect(url_for("roster_list"))
        photo = photo_or_fallback(entry.record.photo, entry.record.full_name)
        fallback = fallback_avatar_url(entry.record.full_name)
        return render_template(
            "admin/personnel_detail.html",
            entry=entry,
            photo_url=photo,
            fallback_photo_url=fallback,
            lecturer_view=True,
            active_page=ACTIVE_PAGE,
        )

    @app.route("/admin/roster/export", endpoint="roster_export")
    @admin_required
    def roster_export():
        q = request.args.get("q", "").strip()
        filters = RosterFilters.from_mapping(request.args)
        try:
            return send_excel(service.export(service.list(filters, q)))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Export roster failed")
            flash("Xuất Excel thất bại", "danger")
        return redirect(url_for("roster_list", **request.args))
