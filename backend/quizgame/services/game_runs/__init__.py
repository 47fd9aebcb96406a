"""Game run lifecycle: creation, ownership, answer submission and results.

Routes call into :class:`GameRunService`; transport concerns (status codes,
JSON bodies) stay in the blueprint.
"""
import time
import uuid
from typing import Dict

from quizgame.models import GameRun
from quizgame.storage import GAME_RUNS
from .scoring import score_responses
from .validation import ValidationResult, validate_responses


class GameRunNotFound(LookupError):
    """No game run has the requested id."""


class NotRunOwner(PermissionError):
    """The game run belongs to another user."""


def _now_ms() -> int:
    return int(time.time() * 1000)


class GameRunService:
    def __init__(self, store, catalog):
        self._store = store
        self._catalog = catalog

    def create(self, principal) -> GameRun:
        run = GameRun(
            id=str(uuid.uuid4()),
            user_name=principal.user_name,
            created_at=_now_ms(),
            responses={},
        )
        self._store.modify(GAME_RUNS, lambda runs: runs.append(run.to_dict()))
        return run

    def get(self, run_id: str) -> GameRun:
        for record in self._store.read(GAME_RUNS):
            if record.get('id') == run_id:
                return GameRun.from_dict(record)
        raise GameRunNotFound(run_id)

    def get_owned(self, run_id: str, principal) -> GameRun:
        run = self.get(run_id)
        if run.user_name != principal.user_name:
            raise NotRunOwner(run_id)
        return run

    def validate(self, body) -> ValidationResult:
        return validate_responses(body, self._catalog.ids)

    def submit_responses(self, run_id: str, responses: Dict[str, int]) -> GameRun:
        """Replace the run's responses with an already validated map."""
        def apply(runs):
            for record in runs:
                if record.get('id') == run_id:
                    record['responses'] = dict(responses)
                    return GameRun.from_dict(record)
            raise GameRunNotFound(run_id)

        return self._store.modify(GAME_RUNS, apply)

    def results(self, run: GameRun) -> dict:
        return score_responses(run, self._catalog)
