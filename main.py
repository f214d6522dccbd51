# main.py
from fastapi_limiter import FastAPILimiter
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.cache import close_redis, get_redis
from controller.controller_dependencies import (
    get_expiry_sweeper,
    get_ledger_store,
    get_notification_dispatcher,
)
from core.errors import ClaimError
from fastapi.responses import JSONResponse
from util.logger import init_logger


async def _real_ip(request: Request) -> str:
    if settings.TRUST_PROXY:
        fwd = request.headers.get("x-forwarded-for")
        if fwd:
            return fwd.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    logger = init_logger()
    try:
        print(f"{Color.GREEN}Initializing...{Color.RESET}")
        redis = await get_redis()
        await FastAPILimiter.init(redis, identifier=_real_ip)
        await get_ledger_store().bootstrap()
    except Exception as e:
        logger.error("startup.failed err=%s", e)
        raise

    sweeper = get_expiry_sweeper()
    sweeper.start()
    print(f"{Color.BLUE}Server Started{Color.RESET}")

    try:
        yield
    finally:
        await sweeper.stop()
        await get_notification_dispatcher().aclose()
        try:
            await close_redis()
        except Exception as e:
            logger.error("shutdown.redis.error err=%s", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type", "Accept"],
)


@app.get("/healthz")
async def healthz():
    return {"ok": True}


@app.exception_handler(ClaimError)
async def claim_error_handler(request: Request, exc: ClaimError):
    return JSONResponse(
        status_code=exc.http_status,
        content={"ok": False, "error": exc.code, "message": exc.message},
    )


@app.exception_handler(429)
async def ratelimit_handler(request: Request, exc):
    info = ErrorMessage.RATE_LIMITED.value
    return JSONResponse(
        status_code=info.http_status,
        content={"ok": False, "error": info.code, "message": info.message},
        headers={"Retry-After": str(settings.RATE_LIMIT_SECONDS)},
    )


routes.register_routes(app)

if __name__ == "__main__":
    import uvicorn

    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=reload)
