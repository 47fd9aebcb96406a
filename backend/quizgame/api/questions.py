from flask import Blueprint, abort, current_app, jsonify

questions = Blueprint('questions', __name__)


def _catalog():
    return current_app.extensions['question_catalog']


@questions.route('', methods=['GET'])
def list_questions():
    return jsonify(_catalog().list_public())


@questions.route('/<string:question_id>', methods=['GET'])
def get_question(question_id):
    question = _catalog().get_public(question_id)
    if question is None:
        abort(404)
    return jsonify(question)
