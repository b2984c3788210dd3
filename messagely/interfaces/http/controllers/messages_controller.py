# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, jsonify

from messagely.application.use_cases.messages.get_message import GetMessageUseCase
from messagely.application.use_cases.messages.mark_message_read import MarkMessageReadUseCase
from messagely.application.use_cases.messages.send_message import SendMessageUseCase
from messagely.domain.messages.exceptions import UnauthorizedError
from messagely.domain.users.repositories import SessionTokenService
from messagely.infrastructure.audit import AuditAction, audit_log
from messagely.infrastructure.auth import auth_required, current_username
from messagely.interfaces.http.dto.messages import (
    MessageCreatedDTO,
    MessageDetailDTO,
    ReadReceiptDTO,
    SendMessageRequestDTO,
)
from messagely.interfaces.http.request_context import client_ip, parse_json
from messagely.shared.logging import logger


class MessagesController:
    def __init__(
        self,
        *,
        tokens: SessionTokenService,
        send_message: SendMessageUseCase,
        get_message: GetMessageUseCase,
        mark_message_read: MarkMessageReadUseCase,
    ) -> None:
        self._tokens = tokens
        self._send_message = send_message
        self._get_message = get_message
        self._mark_message_read = mark_message_read

    def send(self):
        t0 = perf_counter()
        sender = current_username()
        dto = parse_json(SendMessageRequestDTO)

        message = self._send_message.execute(sender, dto.to_username, dto.body)

        audit_log(
            AuditAction.MESSAGE_SENT,
            username=sender,
            ip_address=client_ip(),
            details={"message_id": message.id, "to": message.to_username},
        )
        dt = (perf_counter() - t0) * 1000
        logger.info(f"messages.send: ok (id={message.id}, from={sender}, dt_ms={dt:.0f})")
        return jsonify({"message": MessageCreatedDTO.from_domain(message).model_dump(mode="json")}), 201

    def get(self, message_id: int):
        actor = current_username()
        try:
            detail = self._get_message.execute(actor, message_id)
        except UnauthorizedError:
            self._audit_denied(actor, message_id, "view")
            raise
        return jsonify({"message": MessageDetailDTO.from_domain(detail).model_dump(mode="json")})

    def mark_read(self, message_id: int):
        actor = current_username()
        try:
            receipt = self._mark_message_read.execute(actor, message_id)
        except UnauthorizedError:
            self._audit_denied(actor, message_id, "mark_read")
            raise

        audit_log(
            AuditAction.MESSAGE_READ,
            username=actor,
            ip_address=client_ip(),
            details={"message_id": message_id},
        )
        return jsonify({"message": ReadReceiptDTO.from_domain(receipt).model_dump(mode="json")})

    @staticmethod
    def _audit_denied(actor: str, message_id: int, operation: str) -> None:
        audit_log(
            AuditAction.MESSAGE_ACCESS_DENIED,
            username=actor,
            ip_address=client_ip(),
            details={"message_id": message_id, "operation": operation},
            success=False,
        )

    def as_blueprint(self) -> Blueprint:
        authed = auth_required(self._tokens)
        bp = Blueprint("messages", __name__, url_prefix="/api/messages")
        bp.add_url_rule("", view_func=authed(self.send), methods=["POST"])
        bp.add_url_rule("/<int:message_id>", view_func=authed(self.get), methods=["GET"])
        bp.add_url_rule(
            "/<int:message_id>/read", view_func=authed(self.mark_read), methods=["POST"]
        )
        return bp
