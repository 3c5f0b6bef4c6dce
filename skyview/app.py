import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .controller import AppController
from .location import FixedGeolocation, LocationResolver, ReportedFailure
from .models import TemperatureUnit
from .render import render_state
from .services import WeatherFetcher

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class SearchQuery(BaseModel):
    city: str | None = None


class LocateQuery(BaseModel):
    """Position as reported by the front-end's geolocation capability."""
    lat: float | None = None
    lon: float | None = None
    supported: bool = True
    error: str | None = None


class UnitQuery(BaseModel):
    unit: TemperatureUnit


def _resolver_for(body: LocateQuery) -> LocationResolver:
    """Resolver for the position the viewer's device reported; an empty report means no capability."""
    if not body.supported:
        return LocationResolver(None)
    if body.error:
        return LocationResolver(ReportedFailure(body.error))
    if body.lat is not None and body.lon is not None:
        return LocationResolver(FixedGeolocation(body.lat, body.lon))
    return LocationResolver(None)


def _busy():
    return JSONResponse({"error": "A request is already in progress."}, status_code=409)


def create_app(controller: Optional[AppController] = None) -> FastAPI:
    if controller is None:
        controller = AppController(LocationResolver(None), WeatherFetcher())

    app = FastAPI(title="SkyView")
    app.state.controller = controller

    @app.get("/api/state")
    async def get_state():
        return render_state(controller)

    @app.post("/api/search")
    async def search(body: SearchQuery):
        if controller.loading:
            return _busy()
        await controller.search(body.city)
        return render_state(controller)

    @app.post("/api/locate")
    async def locate(body: LocateQuery):
        if controller.loading:
            return _busy()
        await controller.use_my_location(_resolver_for(body))
        return render_state(controller)

    @app.post("/api/unit/toggle")
    async def toggle_unit():
        controller.toggle_unit()
        return render_state(controller)

    @app.post("/api/unit")
    async def set_unit(body: UnitQuery):
        controller.set_unit(body.unit)
        return render_state(controller)

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


app = create_app()
