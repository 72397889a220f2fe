from .base import create_app

app = create_app()
