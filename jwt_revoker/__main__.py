"""Run the revoker with uvicorn: ``python -m jwt_revoker``."""

import uvicorn

from jwt_revoker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "jwt_revoker.main:app",
        host=settings.api_host,
        port=settings.jwt_revoker_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
