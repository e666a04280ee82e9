"""
FastAPI application for the portfolio dashboard.

Read-only endpoints over an in-memory holdings store. Every request
recomputes its view through MetricsEngine; nothing is cached or written.
"""

import logging
import sys
from typing import Callable

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from portfolio_api import config
from portfolio_api.holdings import (
    Holding,
    HoldingsStore,
    SortDirection,
    SortField,
    filter_holdings,
    sort_holdings,
)
from portfolio_api.kpis import (
    Allocation,
    ComputationError,
    MetricsEngine,
    PerformanceSeries,
    PortfolioSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def setup_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("uvicorn").setLevel(logging.INFO)


def get_engine(request: Request) -> MetricsEngine:
    return request.app.state.engine


def _guarded(compute: Callable, failure_message: str):
    """
    Run one view computation. ComputationError propagates to its handler;
    anything else is logged and returned as a 500 with an error body.
    """
    try:
        return compute()
    except ComputationError:
        raise
    except Exception:
        logger.exception(failure_message)
        return JSONResponse(status_code=500, content={"error": failure_message})


@router.get("/portfolio/holdings", response_model=list[Holding])
def get_holdings(
    search: str | None = None,
    sort: SortField | None = None,
    order: SortDirection = "desc",
    engine: MetricsEngine = Depends(get_engine),
):
    """Holdings in store order unless search or sort is given."""
    def compute():
        rows = filter_holdings(engine.holdings(), search)
        if sort is not None:
            rows = sort_holdings(rows, sort, order)
        return [h.model_dump(mode="json", by_alias=True) for h in rows]

    return _guarded(compute, "Failed to fetch portfolio holdings")


@router.get("/portfolio/allocation", response_model=Allocation)
def get_allocation(engine: MetricsEngine = Depends(get_engine)):
    return _guarded(engine.allocation, "Failed to fetch portfolio allocation")


@router.get("/portfolio/performance", response_model=PerformanceSeries)
def get_performance(engine: MetricsEngine = Depends(get_engine)):
    return _guarded(engine.performance, "Failed to fetch performance data")


@router.get("/portfolio/summary", response_model=PortfolioSummary)
def get_summary(engine: MetricsEngine = Depends(get_engine)):
    return _guarded(engine.summary, "Failed to fetch portfolio summary")


@router.get("/health")
def health() -> dict[str, str]:
    # Liveness check: always 200, even with an empty store
    return {"status": "OK", "message": "Portfolio API is running"}


def create_app(store: HoldingsStore | None = None) -> FastAPI:
    """Build the app around `store`; defaults to the sample holdings in config."""
    if store is None:
        store = HoldingsStore.from_records(config.HOLDINGS)

    app = FastAPI(title=config.APP_NAME, version=config.APP_VERSION)
    app.state.engine = MetricsEngine(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(ComputationError)
    async def computation_error_handler(request: Request, exc: ComputationError):
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"error": str(exc)})

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "API is running"

    app.include_router(router, prefix="/api")
    logger.info("Portfolio API ready with %d holdings", len(store))
    return app


setup_logging()
app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
