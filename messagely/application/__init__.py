# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.messages.get_message import GetMessageUseCase
from .use_cases.messages.list_mailbox import ListMessagesFromUseCase, ListMessagesToUseCase
from .use_cases.messages.mark_message_read import MarkMessageReadUseCase
from .use_cases.messages.send_message import SendMessageUseCase
from .use_cases.users.get_user import GetUserUseCase
from .use_cases.users.list_users import ListUsersUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "GetMessageUseCase",
    "GetUserUseCase",
    "ListMessagesFromUseCase",
    "ListMessagesToUseCase",
    "ListUsersUseCase",
    "LoginUserUseCase",
    "MarkMessageReadUseCase",
    "RegisterUserUseCase",
    "SendMessageUseCase",
]
