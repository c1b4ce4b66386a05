from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.decorators import admin_required
from ..auth.model import EmployeeAccount
from ..container import Container
from ..core.exceptions import DomainError
from ..exports.download import send_excel

ACTIVE_PAGE = "taiKhoan"

_FORM_FIELDS = (
    "account_id",
    "secret",
    "last_name",
    "first_name",
    "birth_date",
    "education",
    "position",
    "work_unit",
    "phone",
    "email",
    "photo_url",
    "expiry_date",
)


def _account_from_form(account_pk=None) -> EmployeeAccount:
    values = {name: request.form.get(name, "") for name in _FORM_FIELDS}
    values["birth_date"] = values["birth_date"].strip() or None
    values["expiry_date"] = values["expiry_date"].strip() or None
    return EmployeeAccount(id=account_pk, **values)


def register(app: Flask, container: Container) -> None:
    service = container.account_service

    def _render_form(account: EmployeeAccount, *, is_edit: bool):
        return render_template("admin/account_form.html", account=account, is_edit=is_edit, active_page=ACTIVE_PAGE)

    @app.route("/admin/accounts", endpoint="accounts_list")
    @admin_required
    def accounts_list():
        q = request.args.get("q", "").strip()
        accounts = []
        try:
            accounts = service.list(q)
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Load accounts failed")
            flash("Lỗi tải danh sách tài khoản", "danger")
        return render_template("admin/account_list.html", accounts=accounts, q=q, active_page=ACTIVE_PAGE)

    @app.route("/admin/accounts/new", methods=["GET", "POST"], endpoint="accounts_create")
    @admin_required
    def accounts_create():
        if request.method == "POST":
            account = _account_from_form()
            try:
                service.save(account, is_edit=False)
                flash("Thêm tài khoản thành công", "success")
                return redirect(url_for("accounts_list"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Create account failed")
                flash("Thêm mới thất bại", "danger")
            return _render_form(account, is_edit=False)

        return _render_form(EmployeeAccount(account_id="", secret=""), is_edit=False)

    @app.route("/admin/accounts/<int:account_pk>/edit", methods=["GET", "POST"], endpoint="accounts_edit")
    @admin_required
    def accounts_edit(account_pk: int):
        if request.method == "POST":
            account = _account_from_form(account_pk)
            try:
                service.save(account, is_edit=True)
                flash("Cập nhật tài khoản thành công", "success")
                return redirect(url_for("accounts_list"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Update account failed")
                flash("Cập nhật thất bại", "danger")
            return _render_form(account, is_edit=True)

        try:
            account = service.get(account_pk)
        except DomainError as e:
            flash(str(e), "danger")
            return redirect(url_for("accounts_list"))
        if account is None:
            flash("Tài khoản không tồn tại", "danger")
            return redirect(url_for("accounts_list"))
        return _render_form(account, is_edit=True)

    @app.route("/admin/accounts/<int:account_pk>/delete", methods=["POST"], endpoint="accounts_delete")
    @admin_required
    def accounts_delete(account_pk: int):
        try:
            if service.delete(account_pk, confirmed=request.form.get("confirm") == "yes"):
                flash("Đã xóa tài khoản", "success")
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Delete account failed")
            flash("Xóa thất bại", "danger")
        return redirect(url_for("accounts_list"))

    @app.route("/admin/accounts/export", endpoint="accounts_export")
    @admin_required
    def accounts_export():
        q = request.args.get("q", "").strip()
        try:
            return send_excel(service.export(service.list(q)))
        except DomainError as e:
            flash(str(e), "danger")
        except Exception:
            app.logger.exception("Export accounts failed")
            flash("Xuất Excel thất bại", "danger")
        return redirect(url_for("accounts_list", q=q))
