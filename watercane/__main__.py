"""Run the API with uvicorn: ``python -m watercane``."""

import uvicorn

from watercane.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "watercane.main:app",
        host="0.0.0.0",
        port=settings.app_port,
        reload=settings.is_development,
    )
