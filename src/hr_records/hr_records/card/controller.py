from __future__ import annotations

import io

from flask import Flask, jsonify, redirect, render_template, send_file, session, url_for

from ..auth.decorators import login_required
from ..auth.session import SessionHolder
from ..container import Container
from .service import build_card, build_qr_payload, render_qr_png


def register(app: Flask, container: Container) -> None:
    def _current_employee():
        return container.auth_service.load_employee(SessionHolder(session).current())

    @app.route("/card", endpoint="employee_card")
    @login_required
    def employee_card():
        employee = _current_employee()
        if employee is None:
            # admin session or profile not loaded yet: let the router decide
            return redirect(url_for("login"))
        return render_template("employee_card.html", card=build_card(employee))

    @app.route("/card/qr.png", endpoint="employee_card_qr")
    @login_required
    def employee_card_qr():
        """QR image chứa thông tin liên hệ của nhân viên đang đăng nhập."""
        employee = _current_employee()
        if employee is None:
            return jsonify({"success": False, "message": "Không có hồ sơ nhân viên"}), 404
        try:
            png = render_qr_png(build_qr_payload(employee))
        except Exception as e:
            app.logger.exception("QR render failed")
            return jsonify({"success": False, "message": str(e)}), 500
        return send_file(io.BytesIO(png), mimetype="image/png")
