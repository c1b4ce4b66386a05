from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.constants import MSG_LOGIN_FAILED
from ..core.enums import View
from ..core.exceptions import AuthenticationError, DomainError
from .decorators import admin_required
from .router import resolve_view
from .session import SessionHolder


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        holder = SessionHolder(session)
        current = holder.current()

        if current is not None:
            try:
                employee = container.auth_service.load_employee(current)
            except DomainError:
                app.logger.exception("Could not load employee profile")
                employee = None

            view = resolve_view(current, employee)
            if view == View.ADMIN_CONSOLE:
                return redirect(url_for("admin_dashboard"))
            if view == View.EMPLOYEE_CARD:
                return redirect(url_for("employee_card"))
            return render_template("loading.html")

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                user_session = container.auth_service.authenticate(username, password)
                holder.login(user_session)
                app.logger.info("Login ok: %s (%s)", user_session.account_id, user_session.kind.value)
                return redirect(url_for("login"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception as e:
                app.logger.exception("Login failed unexpectedly")
                if bool(app.config.get("DEBUG", False)):
                    flash(f"{MSG_LOGIN_FAILED} ({e})", "danger")
                else:
                    flash(MSG_LOGIN_FAILED, "danger")

        return render_template("login.html", username=request.form.get("username", ""))

    @app.route("/logout", endpoint="logout")
    def logout():
        SessionHolder(session).logout()
        flash("Đã đăng xuất hệ thống.", "info")
        return redirect(url_for("login"))

    @app.route("/admin/password", methods=["GET", "POST"], endpoint="change_password")
    @admin_required
    def change_password():
        if request.method == "POST":
            current = SessionHolder(session).current()
            try:
                container.auth_service.change_admin_password(
                    account_id=current.account_id,
                    old_password=request.form.get("old_password", ""),
                    new_password=request.form.get("new_password", ""),
                    confirm_password=request.form.get("confirm_password", ""),
                )
                flash("Mật khẩu đã được thay đổi thành công!", "success")
                return redirect(url_for("admin_dashboard"))
            except DomainError as e:
                flash(str(e), "danger")
            except Exception:
                app.logger.exception("Change password failed")
                flash("Lỗi hệ thống khi đổi mật khẩu", "danger")

        return render_template("admin/change_password.html", active_page="change_password")
