"""FastAPI server exposing the outfit recommendation endpoint."""

from typing import Any, Dict

from fastapi import Body, FastAPI, HTTPException

from ride_app.app import RideOutfitApp

advisor_app = RideOutfitApp()
app = FastAPI(title="Cycling Outfit Advisor", version="0.1.0")


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness check."""

    return {
        "status": "ok",
        "service": advisor_app.config.service_name,
        "environment": advisor_app.config.environment or "local",
    }


@app.post("/recommendations")
async def recommend(payload: Dict[str, Any] = Body(...)) -> dict:
    """Recommend an outfit for the posted weather snapshot and workout.

    The agent validates the body so that rejected requests carry the same
    ``needs_review`` envelope as direct callers receive.
    """

    response = advisor_app.recommend(payload)
    if response.get("status") != "ok":
        raise HTTPException(status_code=422, detail=response)
    return response


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=8080, reload=False)
