"""Schema check for ``PUT /game-runs/<runId>/responses`` bodies.

A valid body is a non-empty JSON object mapping catalog question ids to a
strict integer answer index between 0 and 3. Violations are collected and
returned rather than raised so the route can send them back as a 400 body.
"""
from dataclasses import dataclass, field
from typing import Annotated, Any, Dict, FrozenSet, List, Optional

from pydantic import Field, RootModel, StrictInt, ValidationError

AnswerIndex = Annotated[StrictInt, Field(ge=0, le=3)]


class ResponseMap(RootModel[Annotated[Dict[str, AnswerIndex], Field(min_length=1)]]):
    pass


@dataclass
class ValidationResult:
    value: Optional[Dict[str, int]] = None
    errors: List[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _violation(loc, msg: str, type_: str) -> dict:
    return {'loc': [str(part) for part in loc], 'msg': msg, 'type': type_}


def validate_responses(body: Any, question_ids: FrozenSet[str]) -> ValidationResult:
    errors = []
    value = None
    try:
        value = ResponseMap.model_validate(body).root
    except ValidationError as exc:
        errors.extend(
            _violation(e['loc'], e['msg'], e['type'])
            for e in exc.errors(include_url=False)
        )

    if isinstance(body, dict):
        for key in body:
            if key not in question_ids:
                errors.append(_violation([key], f'Unknown question id {key!r}', 'unknown_question'))

    if errors:
        return ValidationResult(errors=errors)
    return ValidationResult(value=dict(value))
