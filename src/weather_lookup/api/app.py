from typing import Any

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from weather_lookup.api.dependencies import HandlerDep, lifespan
from weather_lookup.config import settings
from weather_lookup.dto import HealthCheckResponse, WeatherResponse

app = FastAPI(
    title="Weather Lookup API",
    description="Weather by place name, IP address or postal code, with Redis-backed caching",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
def root() -> dict[str, Any]:
    """Root endpoint with API information."""
    return {
        "name": "Weather Lookup API",
        "version": "0.1.0",
        "description": "Weather by place name, IP address or postal code",
        "endpoints": {
            "weather": "/weather?location=<place|ip|zip>",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health", response_model=HealthCheckResponse)
def health(handler: HandlerDep) -> JSONResponse:
    """Health check endpoint."""
    result = handler.health_check()
    status_code = status.HTTP_200_OK if result.cache_healthy else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=result.model_dump(), status_code=status_code)


@app.get("/weather", response_model=WeatherResponse)
def weather(
    request: Request,
    handler: HandlerDep,
    location: str | None = Query(None, description="Place name, IP address or postal code"),
) -> WeatherResponse:
    """
    Look up the weather for a location.

    When ``location`` is omitted or blank, the caller's IP address is used.
    """
    client_ip = request.client.host if request.client else None
    return handler.get_weather(location, client_ip)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "weather_lookup.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
