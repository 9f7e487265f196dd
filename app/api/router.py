from fastapi import APIRouter, Depends

from app.api.deps import api_rate_limit
from app.api.routes import cities, holidays, weather

api_router = APIRouter(prefix="/api", dependencies=[Depends(api_rate_limit)])
api_router.include_router(weather.router, tags=["weather"])
api_router.include_router(holidays.router, tags=["holidays"])
api_router.include_router(cities.router, tags=["cities"])
