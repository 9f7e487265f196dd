from fastapi import APIRouter, Depends

from app.api.deps import page_rate_limit
from app.web.routes.pages import router as pages_router

ui_router = APIRouter(include_in_schema=False, dependencies=[Depends(page_rate_limit)])
ui_router.include_router(pages_router)
