import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL, PORT, SERVICE_NAME
from .errors import CapacityExceeded, InvalidArgument, OutOfRange
from .painting import router as painting_router
from .voting import router as voting_router

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=f"Drawing board ({SERVICE_NAME})")

app.include_router(voting_router)
app.include_router(painting_router)


# Both are caller errors: nothing was changed, report 400
@app.exception_handler(InvalidArgument)
@app.exception_handler(OutOfRange)
async def bad_request(request: Request, exc: Exception):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(CapacityExceeded)
async def store_full(request: Request, exc: CapacityExceeded):
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=429, content={"detail": str(exc)})


@app.get("/")
def root():
    return {"service": SERVICE_NAME, "ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("doodleboard.main:app", host="0.0.0.0", port=PORT, log_level=LOG_LEVEL)
