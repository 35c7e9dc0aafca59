import asyncio
import logging
import re

from aiogram import Bot, Dispatcher, types
from aiogram import F
from aiogram.exceptions import TelegramBadRequest
from aiogram.filters.command import Command
from aiogram.fsm.context import FSMContext
from aiogram.utils.keyboard import ReplyKeyboardBuilder

from config import get_settings
from game import AlreadyAnsweredError, InvalidFlagError, QuizError, StaleQuestionError
from questions import (
    CONTINUE_CALLBACK, RESET_CALLBACK,
    continue_keyboard, result_text, send_question, stats_text,
)
from storage import load_quiz, save_quiz, start_quiz

logger = logging.getLogger(__name__)
dp = Dispatcher()

FLAG_RE = re.compile(r"^flag_(\d+)_(\d+)$")

START_BUTTON = "Start game"
RESET_BUTTON = "Reset"
SCORE_BUTTON = "📊 My score"

NO_GAME_TEXT = "No game running yet. Tap “Start game”!"
TAP_NOTICES = {
    InvalidFlagError: "That flag is not on the board.",
    StaleQuestionError: "That question is already over.",
    AlreadyAnsweredError: "Already answered. Tap “Continue”!",
}


async def drop_keyboard(callback: types.CallbackQuery):
    try:
        await callback.bot.edit_message_reply_markup(
            chat_id=callback.message.chat.id,
            message_id=callback.message.message_id,
            reply_markup=None
        )
    except TelegramBadRequest as exc:
        # Message too old or already edited, the answer still goes out
        logger.warning("Could not drop keyboard of message %s: %s", callback.message.message_id, exc)


@dp.callback_query(F.data.startswith("flag_"))
async def handle_flag(callback: types.CallbackQuery, state: FSMContext):
    match = FLAG_RE.match(callback.data)
    if match is None:
        logger.warning("Malformed flag callback: %r", callback.data)
        await callback.answer()
        return

    quiz = await load_quiz(state)
    if quiz is None:
        await callback.answer(NO_GAME_TEXT, show_alert=True)
        return

    round_number, number = int(match.group(1)), int(match.group(2))
    try:
        result = quiz.flag_tapped(number, round_number=round_number)
    except QuizError as exc:
        logger.warning("Rejected tap from %s: %s", callback.from_user.id, exc)
        await callback.answer(TAP_NOTICES.get(type(exc), "That tap does not count."))
        return

    await drop_keyboard(callback)
    await save_quiz(state, quiz)
    # The alert is the popup, the card stays in the chat with the way forward
    await callback.answer(f"{result.title}\n{result.subtitle}", show_alert=True)
    await callback.message.answer(result_text(result), reply_markup=continue_keyboard())


@dp.callback_query(F.data == CONTINUE_CALLBACK)
async def continue_handler(callback: types.CallbackQuery, state: FSMContext):
    await drop_keyboard(callback)
    quiz = await load_quiz(state)
    if quiz is None:
        quiz = await start_quiz(state)
    elif quiz.answered:
        quiz.ask_question()
        await save_quiz(state, quiz)
    await send_question(callback.message, quiz)
    await callback.answer()


@dp.callback_query(F.data == RESET_CALLBACK)
async def reset_callback_handler(callback: types.CallbackQuery, state: FSMContext):
    await drop_keyboard(callback)
    await reset_quiz(callback.message, state)
    await callback.answer()


@dp.message(Command("start"))
async def cmd_start(message: types.Message):
    builder = ReplyKeyboardBuilder()
    builder.add(types.KeyboardButton(text=START_BUTTON))
    builder.add(types.KeyboardButton(text=RESET_BUTTON))
    builder.add(types.KeyboardButton(text=SCORE_BUTTON))
    await message.answer("Welcome to Guess the Flag!", reply_markup=builder.as_markup(resize_keyboard=True))


@dp.message(F.text == START_BUTTON)
@dp.message(Command("quiz"))
async def cmd_quiz(message: types.Message, state: FSMContext):
    await message.answer("Let's play!")
    quiz = await start_quiz(state)
    await send_question(message, quiz)


@dp.message(F.text == RESET_BUTTON)
@dp.message(Command("reset"))
async def cmd_reset(message: types.Message, state: FSMContext):
    await reset_quiz(message, state)


@dp.message(F.text == SCORE_BUTTON)
@dp.message(Command("score"))
async def show_score(message: types.Message, state: FSMContext):
    quiz = await load_quiz(state)
    if quiz is None:
        await message.answer(NO_GAME_TEXT)
        return
    await message.answer(stats_text(quiz))


async def reset_quiz(message, state: FSMContext):
    quiz = await load_quiz(state)
    if quiz is None:
        quiz = await start_quiz(state)
    else:
        quiz.reset()
        await save_quiz(state, quiz)
        logger.info("Score reset for %s", state.key.chat_id)
    await send_question(message, quiz)


async def main():
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
    bot = Bot(token=settings.bot_token)
    if settings.drop_pending_updates:
        await bot.delete_webhook(drop_pending_updates=True)
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
