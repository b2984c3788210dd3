# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from messagely.infrastructure.audit import AuditAction, audit_log
from messagely.interfaces.http.dto.auth import (
    LoginRequestDTO,
    RegisterRequestDTO,
    TokenResponseDTO,
)
from messagely.interfaces.http.request_context import client_ip, parse_json
from messagely.shared.logging import logger


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
        dto = parse_json(RegisterRequestDTO)

        try:
            user, token = self._register_use_case.execute(
                dto.username,
                dto.password,
                first_name=dto.first_name,
                last_name=dto.last_name,
                phone=dto.phone,
            )
        except UserAlreadyExistsError:
            audit_log(
                AuditAction.REGISTER_FAILED,
                username=dto.username,
                ip_address=client_ip(),
                details={"reason": "username_taken"},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            username=user.username,
            ip_address=client_ip(),
            success=True,
        )
        logger.info(f"auth.register: ok username={user.username}")
        return jsonify(TokenResponseDTO(token=token).model_dump()), 201

    def login(self) -> tuple[Response, int]:
        dto = parse_json(LoginRequestDTO)
        ip_address = client_ip()

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                username=dto.username,
                ip_address=ip_address,
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            username=dto.username,
            ip_address=ip_address,
            success=True,
        )
        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenResponseDTO(token=token).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
