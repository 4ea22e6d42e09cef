# pdfchat/main.py
import logging
import os
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pdfchat.api.v1.router import api_router
from pdfchat.core.config import settings
from pdfchat.core.errors import PdfChatError

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="PDF Chat API",
    description="Upload PDFs and ask questions about them.",
    version="1.0.0",
)

# Clients only look at the success flag, so every failure is a 200.
@app.exception_handler(PdfChatError)
async def pdfchat_error_handler(request: Request, exc: PdfChatError):
    return JSONResponse({"success": False, "message": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse({"success": False, "message": "Malformed request."})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return JSONResponse({"success": False, "message": f"Internal error: {type(exc).__name__}"})

app.include_router(api_router)
app.mount("/public", StaticFiles(directory=settings.public_dir, check_dir=False), name="public")

@app.get("/", include_in_schema=False)
def chat_interface():
    return FileResponse(os.path.join(settings.public_dir, "index.html"), media_type="text/html")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
