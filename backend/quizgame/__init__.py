from flask import Flask, jsonify
from flask_bcrypt import Bcrypt
from flask_login import LoginManager
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import click
from quizgame.config import Config

bcrypt = Bcrypt()
login_manager = LoginManager()

DEFAULT_SEED_USERS = ('Iris', 'Max')


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    bcrypt.init_app(flask_app)
    login_manager.init_app(flask_app)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', []))

    from quizgame.storage import JsonDocumentStore, QUESTIONS
    from quizgame.services.catalog import QuestionCatalog
    from quizgame.services.game_runs import GameRunService

    store = JsonDocumentStore(flask_app.config['DATA_DIR'])
    # The catalog is loaded once; answer validation uses this snapshot
    catalog = QuestionCatalog.from_records(store.read(QUESTIONS))
    flask_app.extensions['quiz_store'] = store
    flask_app.extensions['question_catalog'] = catalog
    flask_app.extensions['game_runs'] = GameRunService(store, catalog)
    flask_app.logger.info(f"[startup] data_dir={store.data_dir} questions={len(catalog)}")

    # Registers the Flask-Login request loader
    import quizgame.auth  # noqa: F401

    from quizgame.main import main
    flask_app.register_blueprint(main)

    from quizgame.api.questions import questions
    flask_app.register_blueprint(questions, url_prefix='/questions')

    from quizgame.api.game_runs import game_runs
    flask_app.register_blueprint(game_runs, url_prefix='/game-runs')

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        response = jsonify({'error': exc.name})
        response.status_code = exc.code
        for key, value in exc.get_headers():
            if key.lower() != 'content-type':
                response.headers[key] = value
        return response

    @click.command('data-reset')
    @click.option('--user', 'users', multiple=True,
                  help='User name to seed (repeatable). Defaults to Iris and Max.')
    def data_reset_command(users):
        """Empties game-runs and reseeds the users collection."""
        from quizgame.models import User
        from quizgame.storage import GAME_RUNS, USERS
        password = flask_app.config['SEED_PASSWORD']
        seeded = [
            User(user_name=u, password_hash=bcrypt.generate_password_hash(password).decode('utf-8'))
            for u in (users or DEFAULT_SEED_USERS)
        ]
        store.write(USERS, [u.to_dict() for u in seeded])
        store.write(GAME_RUNS, [])
        click.echo(f"Data has been reset; seeded {', '.join(u.user_name for u in seeded)}")

    flask_app.cli.add_command(data_reset_command)

    return flask_app
