"""FastAPI server exposing the weather engine for deployment."""

from datetime import datetime

from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field, ValidationError

from skycast_app.app import SkycastApp
from skycast_app.logging_config import configure_logging
from models.observation import ForecastPoint, Observation, WeatherCondition
from tools.errors import ObservationUnavailable

configure_logging()

app = FastAPI(title="Skycast", version="0.1.0")
_skycast_app: SkycastApp | None = None


def get_skycast_app() -> SkycastApp:
    """Build the Skycast app lazily so importing the module stays side-effect free."""

    global _skycast_app
    if _skycast_app is None:
        _skycast_app = SkycastApp()
    return _skycast_app


def set_skycast_app(instance: SkycastApp | None) -> None:
    global _skycast_app
    _skycast_app = instance


class LocationRequest(BaseModel):
    """Request payload for a weather lookup."""

    city: str | None = Field(None, description="City name to look up")
    lat: float | None = Field(None, ge=-90, le=90)
    lon: float | None = Field(None, ge=-180, le=180)


class ObservationPayload(BaseModel):
    """Current conditions supplied by the client as chat context."""

    location_name: str
    timestamp: datetime
    temperature: float
    country_code: str = ""
    feels_like: float | None = None
    humidity: int | None = None
    wind_speed: float | None = None
    pressure: float | None = None
    visibility: int | None = None
    condition: str = "Other"
    description: str = ""

    def to_observation(self) -> Observation:
        return Observation(
            location_name=self.location_name,
            timestamp=self.timestamp,
            temperature=self.temperature,
            country_code=self.country_code,
            feels_like=self.feels_like,
            humidity=self.humidity,
            wind_speed=self.wind_speed,
            pressure=self.pressure,
            visibility=self.visibility,
            condition=WeatherCondition.parse(self.condition),
            description=self.description,
        )


class ForecastPointPayload(BaseModel):
    timestamp: datetime
    temperature: float
    feels_like: float | None = None
    humidity: int | None = None
    pressure: float | None = None
    wind_speed: float | None = None
    condition: str = "Other"
    description: str = ""

    def to_point(self) -> ForecastPoint:
        return ForecastPoint(
            timestamp=self.timestamp,
            temperature=self.temperature,
            feels_like=self.feels_like,
            humidity=self.humidity,
            pressure=self.pressure,
            wind_speed=self.wind_speed,
            condition=WeatherCondition.parse(self.condition),
            description=self.description,
        )


class EvaluateRequest(BaseModel):
    """Observation and forecast points supplied by the caller."""

    observation: ObservationPayload
    forecast: list[ForecastPointPayload] = Field(default_factory=list)


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    context: ObservationPayload | None = Field(
        None, description="Observation to answer against; omitted means no current location"
    )


class FavoriteRequest(BaseModel):
    city: str = Field(..., min_length=1)


@app.get("/healthz")
async def healthcheck() -> dict:
    """Lightweight readiness check."""

    skycast = get_skycast_app()
    return {
        "status": "ok",
        "service": "skycast",
        "environment": skycast.config.environment or "local",
        "model": skycast.config.gemini_model,
    }


@app.post("/insights")
def get_insights(request: LocationRequest) -> dict:
    """Fetch conditions for a location and return every derived judgment."""

    skycast = get_skycast_app()
    try:
        insights = skycast.lookup(city=request.city, lat=request.lat, lon=request.lon)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=jsonable_encoder(exc.errors())) from exc
    except ObservationUnavailable as exc:
        status = 404 if exc.reason == "location_not_found" else 502
        raise HTTPException(status_code=status, detail=str(exc)) from exc
    payload = jsonable_encoder(insights)
    payload["status"] = "ok"
    return payload


@app.post("/insights/evaluate")
def evaluate_insights(request: EvaluateRequest) -> dict:
    """Run the engine on caller-supplied data without contacting the weather API."""

    skycast = get_skycast_app()
    insights = skycast.weather_agent.build_insights(
        request.observation.to_observation(),
        [point.to_point() for point in request.forecast],
    )
    payload = jsonable_encoder(insights)
    payload["status"] = "ok"
    return payload


@app.post("/chat")
def chat(request: ChatRequest) -> dict:
    """Answer a weather question, falling back to keyword replies when offline."""

    skycast = get_skycast_app()
    context = request.context.to_observation() if request.context else None
    return skycast.assistant.handle_message(request.message, context=context)


@app.get("/favorites")
def list_favorites() -> dict:
    return {"favorites": get_skycast_app().favorites.list_favorites()}


@app.post("/favorites", status_code=201)
def add_favorite(request: FavoriteRequest) -> dict:
    favorites = get_skycast_app().favorites
    if not favorites.add_favorite(request.city):
        raise HTTPException(status_code=409, detail="city already saved")
    return {"favorites": favorites.list_favorites()}


@app.delete("/favorites/{city}")
def remove_favorite(city: str) -> dict:
    favorites = get_skycast_app().favorites
    if not favorites.remove_favorite(city):
        raise HTTPException(status_code=404, detail="city not saved")
    return {"favorites": favorites.list_favorites()}


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:app", host="0.0.0.0", port=int("8080"), reload=False)
