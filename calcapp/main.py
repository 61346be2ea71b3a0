"""
FastAPI entrypoint for the calculator service.
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import List, Union
from pydantic import BaseModel, Field
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from .config import RATE_LIMIT
from .calculator import (
    OPERATIONS, Calculator, DivisionByZeroError, QuotientOverflowError,
    UnknownOperationError,
    create_calculator,
)
from .logging_setup import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown."""
    app.state.calculator = create_calculator()
    logger.info("Calculator service started")
    yield
    logger.info("Calculator service stopped")


# Rate limiter
limiter = Limiter(key_func=get_remote_address)

# Initialize FastAPI app
app = FastAPI(
    title="Calculator",
    description="Integer add, subtract, multiply and divide over HTTP",
    version="1.0.0",
    lifespan=lifespan
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every HTTP request with method, path, status code, and duration."""
    start_time = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start_time) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class OperationRequest(BaseModel):
    """Request model for the calculate endpoint."""
    a: int = Field(..., description="First operand")
    b: int = Field(..., description="Second operand")


class OperationResponse(BaseModel):
    """Response model for the calculate endpoint."""
    operation: str
    a: int
    b: int
    result: Union[int, float]


class OperationsResponse(BaseModel):
    """Response model for the operations listing."""
    operations: List[str]


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str
    operations: int


def get_calculator(request: Request) -> Calculator:
    """Return the calculator created at startup."""
    calculator = getattr(request.app.state, "calculator", None)
    if calculator is None:
        calculator = create_calculator()
        request.app.state.calculator = calculator
    return calculator


# Endpoints
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.
    """
    return HealthResponse(status="healthy", operations=len(OPERATIONS))


@app.get("/operations", response_model=OperationsResponse)
async def operations_endpoint():
    """List the supported operations."""
    return OperationsResponse(operations=list(OPERATIONS))


@app.post("/calculate/{operation}", response_model=OperationResponse)
@limiter.limit(RATE_LIMIT)
async def calculate_endpoint(
    request: Request,
    operation: str,
    body: OperationRequest,
    calculator: Calculator = Depends(get_calculator),
):
    """
    Apply an operation to two integer operands.

    Division by zero and oversized quotients are rejected with 400;
    unknown operations with 404.
    """
    request_id = uuid.uuid4().hex[:8]
    extra = {"request_id": request_id, "operation": operation, "a": body.a, "b": body.b}

    try:
        result = calculator.calculate(operation, body.a, body.b)
    except UnknownOperationError as e:
        logger.error(f"[{request_id}] {e}", extra=extra)
        raise HTTPException(status_code=404, detail=str(e))
    except (DivisionByZeroError, QuotientOverflowError) as e:
        logger.error(f"[{request_id}] Calculation rejected: {e}", extra=extra)
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"[{request_id}] Calculation failed", extra=extra)
        raise HTTPException(status_code=500, detail=f"Calculation failed: {e}")

    logger.info(f"[{request_id}] {operation}({body.a}, {body.b}) = {result}",
                extra={**extra, "result": result})

    return OperationResponse(operation=operation, a=body.a, b=body.b, result=result)
