# devconnector/core/config.py

import os  # 환경 변수를 읽기 위해 사용합니다.
from datetime import timedelta


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 토큰 서명에 사용하는 비밀 키. 없으면 토큰 발급 시점에 오류가 발생합니다.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    # 프론트엔드가 'x-auth-token' 헤더에 접두어 없이 토큰만 실어 보냅니다.
    JWT_TOKEN_LOCATION = ['headers']
    JWT_HEADER_NAME = 'x-auth-token'
    JWT_HEADER_TYPE = ''
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=100)

    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # GitHub 저장소 조회 (토큰이 없으면 비인증 요청으로 보냅니다)
    GITHUB_API_URL = os.getenv('GITHUB_API_URL', 'https://api.github.com')
    GITHUB_TOKEN = os.getenv('GITHUB_TOKEN')
    GITHUB_TIMEOUT = float(os.getenv('GITHUB_TIMEOUT', 5))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'testing-secret-key-with-enough-length-for-hs256')
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')


class ProductionConfig(Config):
    """운영 환경을 위한 설정 클래스입니다."""
    DEBUG = False


# create_app에서 FLASK_ENV 값에 따라 설정 클래스를 선택하는 데 사용합니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
