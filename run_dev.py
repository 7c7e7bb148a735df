# run_dev.py
"""
Local development launcher for the codegen API.
Host, port, reload and log level come from src.settings (env / .env.dev):
  HOST=127.0.0.1 PORT=9000 DEBUG=false python run_dev.py
"""

import uvicorn

from src.settings import settings


def main() -> None:
    uvicorn.run(
        "src.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
