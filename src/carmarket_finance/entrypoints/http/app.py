from fastapi import FastAPI

from carmarket_finance.entrypoints.http.exception_handlers import register_exception_handlers
from carmarket_finance.entrypoints.http.routes.cars import router as cars_router
from carmarket_finance.entrypoints.http.routes.health import router as health_router
from carmarket_finance.entrypoints.http.routes.loan import router as loan_router
from carmarket_finance.entrypoints.http.routes.ownership import router as ownership_router
from carmarket_finance.entrypoints.http.routes.valuation import router as valuation_router


def build_app() -> FastAPI:
    app = FastAPI(
        title="Car Marketplace Finance API",
        description="""
        Financial calculators for the car marketplace.

        ## Features
        - Auto loan payment, interest and loan-to-value
        - Amortization schedule
        - Total cost of ownership
        - Trade-in estimates (external service with local fallback)
        - Calculator defaults for a listed car

        ## Monetary values
        Amounts travel as decimal strings and are rounded to cents only
        in responses.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(loan_router, prefix="/v1")
    app.include_router(ownership_router, prefix="/v1")
    app.include_router(valuation_router, prefix="/v1")
    app.include_router(cars_router, prefix="/v1")

    return app


app = build_app()
