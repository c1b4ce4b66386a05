from __future__ import annotations

from functools import wraps

from flask import flash, redirect, render_template, session, url_for

from .session import SessionHolder


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if SessionHolder(session).current() is None:
            flash("Vui lòng đăng nhập để tiếp tục!", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        current = SessionHolder(session).current()
        if current is None:
            return redirect(url_for("login"))

        if not current.is_admin:
            return render_template("403.html", current_user=current), 403

        return view(*args, **kwargs)

    return wrapper
