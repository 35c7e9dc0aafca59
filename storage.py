import logging

from aiogram.fsm.context import FSMContext

from game import FlagQuiz

logger = logging.getLogger(__name__)

QUIZ_KEY = 'quiz'


async def load_quiz(state: FSMContext):
    data = await state.get_data()
    stored = data.get(QUIZ_KEY)
    if stored is None:
        return None
    return FlagQuiz.from_dict(stored)


async def save_quiz(state: FSMContext, quiz: FlagQuiz):
    await state.update_data({QUIZ_KEY: quiz.to_dict()})


async def start_quiz(state: FSMContext, rng=None) -> FlagQuiz:
    quiz = FlagQuiz.new(rng=rng)
    await save_quiz(state, quiz)
    logger.info("New game started for %s", state.key.chat_id)
    return quiz


async def clear_quiz(state: FSMContext):
    await state.clear()
