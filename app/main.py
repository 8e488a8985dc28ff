import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import CORS_ORIGINS, LOG_LEVEL, create_client
from app.dependencies.auth import verify_token
from app.routes import chat, ping

logging.basicConfig(level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # raises ConfigurationError before any request is accepted
    app.state.openai_client = create_client()
    yield
    await app.state.openai_client.close()


app = FastAPI(
    title="RecipePilot Chat API",
    description="Recipe discovery chat relay powered by AI.",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logging.warning(f"Malformed chat request: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


# Public routes
app.include_router(ping.router)

# Protected routes
app.include_router(chat.router, dependencies=[Depends(verify_token)])
