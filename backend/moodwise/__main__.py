"""
Run the API with uvicorn: ``python -m moodwise``.
"""
import uvicorn
from moodwise.core.config import settings


def main():
    uvicorn.run(
        "moodwise.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
