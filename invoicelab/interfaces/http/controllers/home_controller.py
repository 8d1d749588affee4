# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, render_template

from invoicelab.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from invoicelab.infrastructure.auth import current_session


class HomeController:
    def __init__(self, *, current_user_use_case: GetCurrentUserUseCase) -> None:
        self._current_user_use_case = current_user_use_case

    def index(self):
        user = self._current_user_use_case.execute(current_session())
        return render_template("index.html", user=user)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("home", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        return bp
