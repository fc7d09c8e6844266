import logging
import os
import time
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import BaseModel, Field

from transit_labels.agency_tools import AgencyTools
from transit_labels.errors import ConfigurationError
from transit_labels.logging_setup import setup_logging
from transit_labels.models import RouteRecord
from transit_labels.registry import build_agency_tools

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transit label normalizer",
    description="Cleans GTFS route, headsign and stop labels for map rendering.",
    version="0.1.0",
)

agency_tools: AgencyTools = build_agency_tools(os.environ.get("TRANSIT_AGENCY", "cfv"))
setup_logging(agency=agency_tools.agency_name)


@app.middleware("http")
async def add_timing(request: Request, call_next):
    start = time.perf_counter()
    response: Response = await call_next(request)
    latency_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"

    logger.info(
        "request",
        extra={
            "request_path": request.url.path,
            "method": request.method,
            "status_code": response.status_code,
            "latency_ms": round(latency_ms, 2),
        },
    )
    return response


class RoutePayload(BaseModel):
    route_id: str
    route_short_name: str
    route_long_name: str = ""
    route_color: Optional[str] = None


class RoutesRequest(BaseModel):
    routes: List[RoutePayload] = Field(..., description="Routes as read from routes.txt.")


class TripHeadsignRequest(BaseModel):
    headsigns: List[str]


class DirectionHeadsignRequest(BaseModel):
    headsign: str
    direction_id: int = Field(0, ge=0, le=1)
    from_stop_name: bool = False


class StopsRequest(BaseModel):
    names: List[str]


def _normalize_routes(routes: List[RoutePayload]) -> List[Dict[str, Any]]:
    results = []
    for payload in routes:
        record = RouteRecord(
            route_id=payload.route_id,
            short_name=payload.route_short_name,
            long_name=payload.route_long_name,
            color=payload.route_color,
        )
        if agency_tools.should_exclude(record):
            results.append({"route_id": payload.route_id, "excluded": True})
            continue
        results.append(
            {
                "route_id": payload.route_id,
                "excluded": False,
                "id": agency_tools.route_id_for(record),
                "color": agency_tools.route_color_for(record),
                "long_name": agency_tools.clean_route_long_name(record.long_name),
            }
        )
    return results


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/api/agency")
async def get_agency() -> Dict[str, Any]:
    return {
        "name": agency_tools.agency_name,
        "color": agency_tools.agency_color,
        "route_type": agency_tools.route_type,
    }


@app.post("/api/routes")
async def normalize_routes(payload: RoutesRequest) -> Dict[str, Any]:
    try:
        routes = await run_in_threadpool(_normalize_routes, payload.routes)
    except ConfigurationError as exc:
        logger.critical(str(exc))
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return {"agency": agency_tools.agency_name, "routes": routes}


@app.post("/api/headsigns/trip")
async def clean_trip_headsigns(payload: TripHeadsignRequest) -> Dict[str, List[str]]:
    return {"headsigns": [agency_tools.clean_trip_headsign(headsign) for headsign in payload.headsigns]}


@app.post("/api/headsigns/direction")
async def clean_direction_headsign(payload: DirectionHeadsignRequest) -> Dict[str, str]:
    headsign = agency_tools.clean_direction_headsign(payload.direction_id, payload.from_stop_name, payload.headsign)
    return {"headsign": headsign}


@app.post("/api/stops")
async def clean_stop_names(payload: StopsRequest) -> Dict[str, List[str]]:
    return {"names": [agency_tools.clean_stop_name(name) for name in payload.names]}
