from aiogram.utils.keyboard import InlineKeyboardBuilder

from data import flag_for
from game import FlagQuiz, TapResult

RESET_CALLBACK = "reset"
CONTINUE_CALLBACK = "continue"


def question_text(quiz: FlagQuiz) -> str:
    return f"Tap the flag of\n{quiz.target}\n\nCurrent score: {quiz.score}"


async def send_question(message, quiz: FlagQuiz):
    kb = generate_flags_keyboard(quiz)
    await message.answer(question_text(quiz), reply_markup=kb)


def generate_flags_keyboard(quiz: FlagQuiz):
    builder = InlineKeyboardBuilder()

    # Buttons carry the glyph only, the name would give the answer away
    for number, country in enumerate(quiz.choices):
        builder.button(text=flag_for(country), callback_data=f"flag_{quiz.round_number}_{number}")
    builder.button(text="Reset", callback_data=RESET_CALLBACK)

    builder.adjust(1)
    return builder.as_markup()


def continue_keyboard():
    builder = InlineKeyboardBuilder()
    builder.button(text="Continue", callback_data=CONTINUE_CALLBACK)
    return builder.as_markup()


def result_text(result: TapResult) -> str:
    mark = "✅" if result.correct else "❌"
    return f"{mark} {result.title}\n{result.subtitle}\n\nCurrent score: {result.score}"


def stats_text(quiz: FlagQuiz) -> str:
    text = "📈 Your session:\n\n"
    text += f"• Current score: {quiz.score}\n"
    text += f"• Correct: {quiz.correct}\n"
    text += f"• Wrong: {quiz.wrong}\n"
    text += f"• Accuracy: {quiz.accuracy:.1f}%"
    return text
