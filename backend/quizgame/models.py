from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class User:
    user_name: str
    password_hash: str

    @classmethod
    def from_dict(cls, data: dict) -> 'User':
        return cls(user_name=data['userName'], password_hash=data['password'])

    def to_dict(self):
        return {
            'userName': self.user_name,
            'password': self.password_hash,
        }


@dataclass
class Question:
    id: str
    question: str
    options: List[str]
    correct_answer: int

    @classmethod
    def from_dict(cls, data: dict) -> 'Question':
        return cls(
            id=data['id'],
            question=data['question'],
            options=list(data['options']),
            correct_answer=data['correctAnswer'],
        )

    def public_dict(self):
        """Serialized question without the answer key."""
        return {
            'id': self.id,
            'question': self.question,
            'options': list(self.options),
        }

    def to_dict(self):
        data = self.public_dict()
        data['correctAnswer'] = self.correct_answer
        return data


@dataclass
class GameRun:
    id: str
    user_name: str
    created_at: int  # epoch milliseconds
    responses: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> 'GameRun':
        return cls(
            id=data['id'],
            user_name=data['userName'],
            created_at=data['createdAt'],
            responses=dict(data.get('responses') or {}),
        )

    def to_dict(self):
        return {
            'id': self.id,
            'userName': self.user_name,
            'createdAt': self.created_at,
            'responses': dict(self.responses),
        }
