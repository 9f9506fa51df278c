"""pmapi: 속성/효과 기반 아이템 모델 라이브러리"""

__version__ = "0.1.0a0"
