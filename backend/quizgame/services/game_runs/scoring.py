from quizgame.models import GameRun
from quizgame.services.catalog import QuestionCatalog


def score_responses(run: GameRun, catalog: QuestionCatalog) -> dict:
    """Mark each submitted answer right or wrong.

    Answers to question ids missing from the catalog count as wrong.
    """
    scored = {}
    for question_id, answer_index in run.responses.items():
        question = catalog.get(question_id)
        scored[question_id] = question is not None and question.correct_answer == answer_index
    return {
        'id': run.id,
        'userName': run.user_name,
        'createdAt': run.created_at,
        'responses': scored,
    }
