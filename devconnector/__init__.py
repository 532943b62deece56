# devconnector/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from flask_jwt_extended import JWTManager
from werkzeug.exceptions import HTTPException
import firebase_admin
from firebase_admin import credentials, firestore

# - 설정 / 공통
from devconnector.core.config import config_by_name
from devconnector.core.errors import ApiError, SERVER_ERROR
from devconnector.core.security import TokenService, register_auth_guard
from devconnector.schemas.base import validation_error_response

# - API 블루프린트
from devconnector.api.users.routes import users_bp
from devconnector.api.auth.routes import auth_bp
from devconnector.api.profiles.routes import profiles_bp
from devconnector.api.posts.routes import posts_bp

# - 서비스 모듈
from devconnector.api.auth.services import AuthService
from devconnector.api.profiles.services import ProfileService
from devconnector.api.posts.services import PostService
from devconnector.services.github_service import GithubService


def init_firestore(app: Flask):
    """
    Firebase Admin SDK를 초기화하고 Firestore 클라이언트를 반환합니다.
    서비스 계정 키 경로가 없으면 Application Default Credentials를 사용합니다.
    """
    if not firebase_admin._apps:
        cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
        if cred_path:
            if not os.path.exists(cred_path):
                raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
            cred = credentials.Certificate(cred_path)
        else:
            cred = credentials.ApplicationDefault()
        options = {}
        if app.config.get('FIREBASE_PROJECT_ID'):
            options['projectId'] = app.config['FIREBASE_PROJECT_ID']
        firebase_admin.initialize_app(cred, options)
    return firestore.client()


def create_app(config_name: str = None, db=None):
    """
    Flask 애플리케이션 팩토리 함수.
    db를 넘기면 Firebase 초기화를 건너뛰고 해당 클라이언트를 사용합니다 (테스트용).
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 확장 기능 및 외부 서비스 초기화
    # =====================================================================================
    jwt_manager = JWTManager(app)
    register_auth_guard(jwt_manager)

    if db is None:
        db = init_firestore(app)

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['tokens'] = TokenService(expires_delta=app.config['JWT_ACCESS_TOKEN_EXPIRES'])
    app.services['auth'] = AuthService(db, token_service=app.services['tokens'])
    app.services['profiles'] = ProfileService(db)
    app.services['posts'] = PostService(db)
    app.services['github'] = GithubService(
        api_url=app.config['GITHUB_API_URL'],
        token=app.config.get('GITHUB_TOKEN'),
        timeout=app.config['GITHUB_TIMEOUT']
    )

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(users_bp, url_prefix='/api/user')
    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(profiles_bp, url_prefix='/api/profile')
    app.register_blueprint(posts_bp, url_prefix='/api/post')

    @app.route('/')
    def index():
        return jsonify({"msg": "API Running"}), 200

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return validation_error_response(err)

    @app.errorhandler(ApiError)
    def handle_api_error(err):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 라우팅 404, 405 등도 JSON 본문으로 응답합니다.
        return jsonify({"msg": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify(SERVER_ERROR), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
