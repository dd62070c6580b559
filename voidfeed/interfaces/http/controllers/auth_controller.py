# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from voidfeed.application.use_cases.users.login_user import LoginUserUseCase
from voidfeed.application.use_cases.users.register_user import RegisterUserUseCase
from voidfeed.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from voidfeed.interfaces.http.dto.common import dump, parse_body


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO, request.get_json(silent=True))

        user, token = self._register_use_case.execute(dto.username, dto.password, dto.email)

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_entity(user))
        return jsonify(dump(payload)), 200

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO, request.get_json(silent=True))

        user, token = self._login_use_case.execute(dto.username, dto.password)

        payload = AuthSuccessDTO(token=token, user=UserDTO.from_entity(user))
        return jsonify(dump(payload)), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
