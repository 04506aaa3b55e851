"""FastAPI application entrypoint."""

from dotenv import load_dotenv
from fastapi import FastAPI

from loan_calculator.adapters.inbound.http.routes import router

# Load environment variables from .env file
load_dotenv()

app = FastAPI(
    title="Loan Calculator",
    description="Fixed-rate loan amortization calculator",
    version="0.1.0",
)

app.include_router(router)
