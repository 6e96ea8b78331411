from .api import bp as api_bp
