# workforce_planner/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .database import create_db_and_tables
from .seed_data import seed_master_data

from .api import workforce as workforce_api
from .api import customers as customers_api
from .api import forecast as forecast_api
from .api import kpi as kpi_api
from .api import settings as settings_api


app = FastAPI(title="Warehouse Workforce Planner", version="2.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(workforce_api.router)
app.include_router(customers_api.router)
app.include_router(forecast_api.router)
app.include_router(kpi_api.router)
app.include_router(settings_api.router)


@app.on_event("startup")
async def startup_event():
    create_db_and_tables()
    if settings.seed_data:
        if seed_master_data():
            print("✓ Demo customer and roster data seeded")


@app.get("/")
def root():
    return {"service": "warehouse-workforce-planner", "docs": "/docs"}
