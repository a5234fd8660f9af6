"""FastAPI application entry point."""

import logging

from fastapi import FastAPI

from loan_amortization.api.routes import amortization
from loan_amortization.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Loan Amortization",
    description="Fixed-rate loan amortization schedules",
    version="0.1.0",
    debug=settings.debug,
)

app.include_router(amortization.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
