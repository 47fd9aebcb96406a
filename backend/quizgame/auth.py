"""Credential checks, bearer tokens and the Flask-Login request loader.

Users authenticate once with HTTP Basic credentials against the ``users``
collection and receive an HS256 token. Every protected request then carries
``Authorization: Bearer <token>``; the request loader turns a valid token
back into a :class:`Principal` holding only the username.

Tokens are issued without an ``exp`` claim and therefore never expire.
"""
from typing import Optional

import jwt
from flask import current_app, jsonify
from flask_login import UserMixin

from quizgame import bcrypt, login_manager
from quizgame.models import User
from quizgame.storage import USERS


class Principal(UserMixin):
    """Authenticated identity of the current request."""

    def __init__(self, user_name: str):
        self.user_name = user_name

    def get_id(self):
        return self.user_name

    def __repr__(self):
        return f'<Principal {self.user_name}>'


def verify_credentials(store, user_name: str, password: str) -> Optional[Principal]:
    """Return the matching principal, or None for an unknown user or wrong password."""
    if not user_name or password is None:
        return None
    user = next(
        (User.from_dict(u) for u in store.read(USERS) if u.get('userName') == user_name),
        None,
    )
    if user is None:
        return None
    try:
        if not bcrypt.check_password_hash(user.password_hash, password):
            return None
    except ValueError:
        # Malformed stored hash or over-long password
        current_app.logger.warning(f"[credentials] user={user_name} password check failed")
        return None
    return Principal(user.user_name)


def issue_token(principal: Principal, secret: str, algorithm: str = 'HS256') -> str:
    payload = {'userName': principal.user_name, 'sub': principal.user_name}
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token: str, secret: str, algorithm: str = 'HS256') -> Optional[Principal]:
    """Decode a bearer token; any signature or format problem yields None."""
    try:
        data = jwt.decode(token, secret, algorithms=[algorithm])
    except jwt.InvalidTokenError:
        return None
    user_name = data.get('userName')
    if not isinstance(user_name, str) or not user_name:
        return None
    return Principal(user_name)


def bearer_token(request) -> Optional[str]:
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


@login_manager.request_loader
def load_principal_from_request(request):
    token = bearer_token(request)
    if token is None:
        return None
    principal = verify_token(
        token,
        current_app.config['JWT_SECRET'],
        current_app.config.get('JWT_ALGORITHM', 'HS256'),
    )
    if principal is None:
        current_app.logger.warning("[auth] rejected bearer token")
    return principal


@login_manager.unauthorized_handler
def unauthorized():
    return jsonify({'error': 'Unauthorized'}), 401
