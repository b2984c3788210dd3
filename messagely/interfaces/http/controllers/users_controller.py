# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from messagely.application.use_cases.messages.list_mailbox import (
    ListMessagesFromUseCase,
    ListMessagesToUseCase,
)
from messagely.application.use_cases.users.get_user import GetUserUseCase
from messagely.application.use_cases.users.list_users import ListUsersUseCase
from messagely.domain.users.repositories import SessionTokenService
from messagely.infrastructure.auth import auth_required, current_username
from messagely.interfaces.http.dto.messages import InboxEntryDTO, OutboxEntryDTO
from messagely.interfaces.http.dto.users import UserDetailDTO, UserProfileDTO
from messagely.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        tokens: SessionTokenService,
        get_user: GetUserUseCase,
        list_users: ListUsersUseCase,
        list_messages_to: ListMessagesToUseCase,
        list_messages_from: ListMessagesFromUseCase,
    ) -> None:
        self._tokens = tokens
        self._get_user = get_user
        self._list_users = list_users
        self._list_messages_to = list_messages_to
        self._list_messages_from = list_messages_from

    def list_users(self):
        users = self._list_users.execute()
        logger.info(f"users.list: ok (user={current_username()}, n={len(users)})")
        return jsonify(
            {"users": [UserProfileDTO.from_domain(u).model_dump(mode="json") for u in users]}
        )

    def get_user(self, username: str):
        detail = self._get_user.execute(username)
        return jsonify({"user": UserDetailDTO.from_domain(detail).model_dump(mode="json")})

    def messages_to(self, username: str):
        entries = self._list_messages_to.execute(current_username(), username)
        logger.info(f"users.messages_to: ok (user={username}, n={len(entries)})")
        return jsonify(
            {
                "messages": [
                    InboxEntryDTO.from_domain(e).model_dump(mode="json") for e in entries
                ]
            }
        )

    def messages_from(self, username: str):
        entries = self._list_messages_from.execute(current_username(), username)
        logger.info(f"users.messages_from: ok (user={username}, n={len(entries)})")
        return jsonify(
            {
                "messages": [
                    OutboxEntryDTO.from_domain(e).model_dump(mode="json") for e in entries
                ]
            }
        )

    def as_blueprint(self) -> Blueprint:
        authed = auth_required(self._tokens)
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("", view_func=authed(self.list_users), methods=["GET"])
        bp.add_url_rule("/<username>", view_func=authed(self.get_user), methods=["GET"])
        bp.add_url_rule("/<username>/to", view_func=authed(self.messages_to), methods=["GET"])
        bp.add_url_rule(
            "/<username>/from", view_func=authed(self.messages_from), methods=["GET"]
        )
        return bp
