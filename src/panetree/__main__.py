"""python -m panetree"""

from .cli import app

app()
