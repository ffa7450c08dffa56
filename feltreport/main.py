from fastapi import FastAPI
from contextlib import asynccontextmanager
from feltreport.api.routes import router
from feltreport.core.config import settings
from feltreport.ui.presenter import FeltReportPresenter
from feltreport.ui.screen import Screen

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    The screen is built here, on the event loop thread, which makes the loop
    its owner. Startup kicks off the one background fetch.
    """
    # Startup
    print("Initializing Did You Feel It...")
    presenter = FeltReportPresenter(Screen())
    app.state.presenter = presenter
    presenter.on_ready()
    print(f"Fetch started for {settings.USGS_REQUEST_URL}")

    yield

    # Shutdown
    print("Shutting down Did You Feel It...")

app = FastAPI(
    title="Did You Feel It?",
    description="Perceived strength of a single earthquake from USGS felt reports",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Did You Feel It?",
        "version": "1.0.0",
        "endpoints": {
            "screen": "GET /screen",
            "health": "GET /health"
        }
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("feltreport.main:app", host=settings.HOST, port=settings.PORT, reload=False)
