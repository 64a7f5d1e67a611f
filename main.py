"""
School Locator Backend
======================
Entry point. Run with: uvicorn main:app --reload  (or ``python main.py``)
"""

import uvicorn

from src.api.app import create_app
from src.config import settings

app = create_app(settings)

if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port)
