from typing import Dict, FrozenSet, Iterable, List, Optional

from quizgame.models import Question


class QuestionCatalog:
    """Read-only question catalog, built once when the app starts.

    Later edits to the backing ``questions`` collection are not picked up
    until the process restarts.
    """

    def __init__(self, questions: Iterable[Question]):
        self._questions: List[Question] = list(questions)
        self._by_id: Dict[str, Question] = {q.id: q for q in self._questions}

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> 'QuestionCatalog':
        return cls(Question.from_dict(r) for r in records)

    @property
    def ids(self) -> FrozenSet[str]:
        return frozenset(self._by_id)

    def __len__(self):
        return len(self._questions)

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def list_public(self) -> List[dict]:
        return [q.public_dict() for q in self._questions]

    def get_public(self, question_id: str) -> Optional[dict]:
        question = self.get(question_id)
        return question.public_dict() if question else None
