"""FastAPI server exposing morning suggestion endpoints."""

from functools import lru_cache

from fastapi import Depends, FastAPI, HTTPException
from pydantic import ValidationError

from logic.validation import MorningSuggestionsRequest, PreferencesUpdate, validation_failure
from models.suggestions import to_payload
from morning_app.app import MorningHelperApp
from morning_app.logging_config import configure_logging, get_logger

configure_logging()

LOGGER = get_logger(__name__)
app = FastAPI(title="Morning Helper", version="0.1.0")


@lru_cache(maxsize=1)
def get_helper() -> MorningHelperApp:
    """Build the application once per process."""

    return MorningHelperApp()


@app.get("/healthz")
async def healthcheck(helper: MorningHelperApp = Depends(get_helper)) -> dict:
    """Lightweight readiness probe."""

    return {
        "status": "ok",
        "service": "morning-helper",
        "environment": helper.config.environment or "local",
        "ai_enabled": helper.enhancer is not None,
    }


@app.post("/suggestions/morning")
async def morning_suggestions(
    request: MorningSuggestionsRequest, helper: MorningHelperApp = Depends(get_helper)
) -> dict:
    """Generate clothing, accessory and news suggestions for the given location."""

    try:
        suggestions = await helper.morning_suggestions(
            location=request.location.to_domain(),
            settings=request.preferences.to_domain() if request.preferences is not None else None,
            user_id=request.user_id,
            use_ai=request.use_ai,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=validation_failure("Stored settings are invalid", exc))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception as exc:
        LOGGER.exception("Morning suggestions failed")
        raise HTTPException(
            status_code=503, detail="Suggestions are temporarily unavailable, please retry."
        ) from exc
    return to_payload(suggestions)


@app.get("/settings/{user_id}")
async def read_settings(user_id: str, helper: MorningHelperApp = Depends(get_helper)) -> dict:
    try:
        return to_payload(helper.settings_store.load(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.put("/settings/{user_id}")
async def update_settings(
    user_id: str, update: PreferencesUpdate, helper: MorningHelperApp = Depends(get_helper)
) -> dict:
    try:
        return to_payload(helper.settings_store.update(user_id, update.changes()))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.get("/services/availability")
async def services_availability(helper: MorningHelperApp = Depends(get_helper)) -> dict:
    return await helper.services_availability()


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int(os.getenv("PORT", "8080")), reload=False)
