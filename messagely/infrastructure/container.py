# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from messagely.application.services.password_hashing import WerkzeugPasswordHasher
from messagely.application.services.session_tokens import JwtSessionTokenService
from messagely.application.use_cases.messages.get_message import GetMessageUseCase
from messagely.application.use_cases.messages.list_mailbox import (
    ListMessagesFromUseCase,
    ListMessagesToUseCase,
)
from messagely.application.use_cases.messages.mark_message_read import MarkMessageReadUseCase
from messagely.application.use_cases.messages.send_message import SendMessageUseCase
from messagely.application.use_cases.users.get_user import GetUserUseCase
from messagely.application.use_cases.users.list_users import ListUsersUseCase
from messagely.application.use_cases.users.login_user import LoginUserUseCase
from messagely.application.use_cases.users.register_user import RegisterUserUseCase
from messagely.domain.messages.access import AccessGuard
from messagely.infrastructure.db import SessionLocal
from messagely.infrastructure.repositories.messages.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from messagely.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from messagely.interfaces.http.controllers.auth_controller import AuthController
from messagely.interfaces.http.controllers.messages_controller import MessagesController
from messagely.interfaces.http.controllers.misc_controller import MiscController
from messagely.interfaces.http.controllers.users_controller import UsersController
from messagely.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(rounds=self.config.auth.password_hash_rounds)

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(self.config.auth)

    @cached_property
    def access_guard(self) -> AccessGuard:
        return AccessGuard()

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def message_repository(self) -> SqlAlchemyMessageRepository:
        return SqlAlchemyMessageRepository(SessionLocal)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    @cached_property
    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(users=self.user_repository)

    # Message use cases

    @cached_property
    def send_message_use_case(self) -> SendMessageUseCase:
        return SendMessageUseCase(messages=self.message_repository)

    @cached_property
    def get_message_use_case(self) -> GetMessageUseCase:
        return GetMessageUseCase(messages=self.message_repository, guard=self.access_guard)

    @cached_property
    def mark_message_read_use_case(self) -> MarkMessageReadUseCase:
        return MarkMessageReadUseCase(
            messages=self.message_repository, guard=self.access_guard
        )

    @cached_property
    def list_messages_to_use_case(self) -> ListMessagesToUseCase:
        return ListMessagesToUseCase(messages=self.message_repository, guard=self.access_guard)

    @cached_property
    def list_messages_from_use_case(self) -> ListMessagesFromUseCase:
        return ListMessagesFromUseCase(
            messages=self.message_repository, guard=self.access_guard
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            tokens=self.session_tokens,
            get_user=self.get_user_use_case,
            list_users=self.list_users_use_case,
            list_messages_to=self.list_messages_to_use_case,
            list_messages_from=self.list_messages_from_use_case,
        )

    @cached_property
    def messages_controller(self) -> MessagesController:
        return MessagesController(
            tokens=self.session_tokens,
            send_message=self.send_message_use_case,
            get_message=self.get_message_use_case,
            mark_message_read=self.mark_message_read_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()
