from flask import Blueprint, abort, current_app, jsonify, request
from flask_login import current_user, login_required

from quizgame.services.game_runs import GameRunNotFound, NotRunOwner

game_runs = Blueprint('game_runs', __name__)


def _service():
    return current_app.extensions['game_runs']


def _owned_run_or_abort(run_id):
    try:
        return _service().get_owned(run_id, current_user)
    except GameRunNotFound:
        abort(404)
    except NotRunOwner:
        current_app.logger.warning(f"[ownership] user={current_user.user_name} denied run={run_id}")
        abort(403)


@game_runs.route('', methods=['POST'])
@login_required
def create_game_run():
    run = _service().create(current_user)
    current_app.logger.info(f"[create_run] run={run.id} user={run.user_name}")
    return jsonify({'runId': run.id})


@game_runs.route('/<string:run_id>/responses', methods=['PUT'])
@login_required
def submit_responses(run_id):
    _owned_run_or_abort(run_id)

    result = _service().validate(request.get_json(silent=True))
    if not result.ok:
        return jsonify({'error': result.errors}), 400

    try:
        _service().submit_responses(run_id, result.value)
    except GameRunNotFound:
        abort(404)
    current_app.logger.info(f"[submit] run={run_id} answers={len(result.value)}")
    return '', 200


@game_runs.route('/<string:run_id>/results', methods=['GET'])
@login_required
def get_results(run_id):
    run = _owned_run_or_abort(run_id)
    return jsonify(_service().results(run))
