from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from typing import Any

from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.methods import EditMessageReplyMarkup


@dataclass(slots=True)
class DummyAnswerCall:
    text: str | None
    kwargs: dict[str, Any]


class DummyBot:
    def __init__(self) -> None:
        self.raise_on_edit = False
        self.edited_markups: list[dict[str, Any]] = []

    async def edit_message_reply_markup(self, **kwargs: Any) -> None:
        if self.raise_on_edit:
            raise TelegramBadRequest(
                method=EditMessageReplyMarkup(**kwargs),
                message="Bad Request: message to edit not found",
            )
        self.edited_markups.append(kwargs)


class DummyMessage:
    def __init__(
        self,
        *,
        bot: DummyBot | None = None,
        message_id: int = 10,
        user_id: int = 1,
        chat_id: int | None = None,
    ) -> None:
        self.bot = bot or DummyBot()
        self.message_id = message_id
        self.from_user = SimpleNamespace(id=user_id)
        self.chat = SimpleNamespace(id=user_id if chat_id is None else chat_id)
        self.answers: list[DummyAnswerCall] = []

    async def answer(self, text: str | None = None, **kwargs: Any) -> None:
        self.answers.append(DummyAnswerCall(text=text, kwargs=kwargs))


class DummyCallback:
    def __init__(self, *, data: str | None, user_id: int = 1, message: DummyMessage | None = None) -> None:
        self.data = data
        self.from_user = SimpleNamespace(id=user_id)
        self.message = message or DummyMessage(user_id=user_id)
        self.bot = self.message.bot
        self.answer_calls: list[dict[str, Any]] = []

    async def answer(self, text: str | None = None, show_alert: bool = False) -> None:
        self.answer_calls.append({"text": text, "show_alert": show_alert})


def make_state(chat_id: int = 1) -> FSMContext:
    return FSMContext(
        storage=MemoryStorage(),
        key=StorageKey(bot_id=42, chat_id=chat_id, user_id=chat_id),
    )
