"""
FastAPI backend for KDP page setup

Exposes preset lookup and page spec resolution over HTTP.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kdp_page_setup import __version__
from kdp_page_setup.errors import PageSetupError
from kdp_page_setup.web import api

app = FastAPI(
    title="KDP Page Setup API",
    description="Resolve KDP trim sizes, margins and paper settings",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PageSetupError)
async def page_setup_exception_handler(request: Request, exc: PageSetupError):
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": str(exc)},
    )


@app.get("/")
async def root():
    return {
        "message": "KDP Page Setup API",
        "version": __version__,
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(api.router, prefix="/api", tags=["page-setup"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
