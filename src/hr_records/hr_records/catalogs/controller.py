from __future__ import annotations

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..auth.decorators import admin_required
from ..container import Container
from ..core.exceptions import DomainError
from ..exports.download import send_excel
from .model import CatalogItem
from .service import CatalogService


def _item_from_form(service: CatalogService, item_id=None) -> CatalogItem:
    d = service.definition
    f = request.form
    sort_order = None
    if d.sort_column:
        raw = (f.get("sort_order") or "").strip()
        sort_order = int(raw) if raw.lstrip("-").isdigit() else 0
    return CatalogItem(
        item_id=item_id,
        code=(f.get("code") or "").strip(),
        value=f.get("value") or "",
        note=(f.get("note") or "") if d.note_column else None,
        sort_order=sort_order,
        is_default=(f.get("is_default") == "on") if d.default_column else None,
    )


def register(app: Flask, container: Container) -> None:
    def _service(slug: str) -> CatalogService:
        service = container.catalog(slug)
        if service is None:
            abort(404)
        return service

    def _render_form(service: CatalogService, item: CatalogItem, *, is_edit: bool):
        return render_template(
            "admin/catalog_form.html",
            definition=service.definition,
            item=item,
            is_edit=is_edit,
            active_page=service.definition.menu_id,
        )

    @app.route("/admin/catalogs/<slug>", endpoint="catalog_list")
    @admin_required
    def catalog_list(slug: str):
        service = _service(slug)
        q = request.args.get("q", "").strip()
        items = []
        try:
            items = service.list(q)
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Load catalog %s failed", slug)
            flash(f"Lỗi khi tải danh mục {service.definition.label}", "danger")

        return render_template(
            "admin/catalog_list.html",
            definition=service.definition,
            items=items,
            q=q,
            active_page=service.definition.menu_id,
        )

    @app.route("/admin/catalogs/<slug>/new", methods=["GET", "POST"], endpoint="catalog_create")
    @admin_required
    def catalog_create(slug: str):
        service = _service(slug)
        if not service.definition.allow_add:
            flash(f"Danh mục {service.definition.label} không hỗ trợ thêm mới", "warning")
            return redirect(url_for("catalog_list", slug=slug))

        if request.method == "POST":
            item = _item_from_form(service)
            try:
                service.save(item, is_edit=False)
                flash("Thêm mới thành công", "success")
                return redirect(url_for("catalog_list", slug=slug))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Create catalog item failed")
                flash("Thêm mới thất bại", "danger")
            return _render_form(service, item, is_edit=False)

        try:
            item = service.new_item()
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("catalog_list", slug=slug))
        return _render_form(service, item, is_edit=False)

    @app.route("/admin/catalogs/<slug>/<int:item_id>/edit", methods=["GET", "POST"], endpoint="catalog_edit")
    @admin_required
    def catalog_edit(slug: str, item_id: int):
        service = _service(slug)
        try:
            loaded = service.load()
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("catalog_list", slug=slug))

        existing = service.get(item_id, items=loaded)
        if existing is None:
            flash(f"Không tìm thấy {service.definition.noun}", "danger")
            return redirect(url_for("catalog_list", slug=slug))

        if request.method == "POST":
            item = _item_from_form(service, item_id=item_id).with_code(existing.code)
            try:
                service.save(item, is_edit=True, loaded=loaded)
                flash("Cập nhật thành công", "success")
                return redirect(url_for("catalog_list", slug=slug))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Update catalog item failed")
                flash("Cập nhật thất bại", "danger")
            return _render_form(service, item, is_edit=True)

        return _render_form(service, existing, is_edit=True)

    @app.route("/admin/catalogs/<slug>/<int:item_id>/delete", methods=["POST"], endpoint="catalog_delete")
    @admin_required
    def catalog_delete(slug: str, item_id: int):
        service = _service(slug)
        confirmed = request.form.get("confirm") == "yes"
        try:
            if service.delete(item_id, confirmed=confirmed):
                flash("Đã xóa thành công", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Delete catalog item failed")
            flash("Xóa thất bại", "danger")
        return redirect(url_for("catalog_list", slug=slug))

    @app.route("/admin/catalogs/<slug>/export", endpoint="catalog_export")
    @admin_required
    def catalog_export(slug: str):
        service = _service(slug)
        q = request.args.get("q", "").strip()
        try:
            return send_excel(service.export(service.list(q)))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Export catalog %s failed", slug)
            flash("Xuất Excel thất bại", "danger")
        return redirect(url_for("catalog_list", slug=slug, q=q))
