from flask import Blueprint, current_app, jsonify, request

from quizgame.auth import issue_token, verify_credentials

main = Blueprint('main', __name__)


def _basic_challenge():
    response = jsonify({'error': 'Unauthorized'})
    response.status_code = 401
    response.headers['WWW-Authenticate'] = 'Basic realm="Users"'
    return response


@main.route('/authenticate', methods=['POST'])
def authenticate():
    credentials = request.authorization
    if credentials is None or credentials.type != 'basic':
        return _basic_challenge()

    store = current_app.extensions['quiz_store']
    principal = verify_credentials(store, credentials.username, credentials.password)
    if principal is None:
        current_app.logger.warning(f"[authenticate] failed login user={credentials.username}")
        return _basic_challenge()

    token = issue_token(
        principal,
        current_app.config['JWT_SECRET'],
        current_app.config.get('JWT_ALGORITHM', 'HS256'),
    )
    current_app.logger.info(f"[authenticate] user={principal.user_name}")
    return jsonify({'token': token})
